import os
from dataclasses import dataclass

import pytest

# Before the packages import boto3/Powertools
os.environ.setdefault("AWS_DEFAULT_REGION", "us-east-1")
os.environ.setdefault("POWERTOOLS_TRACE_DISABLED", "1")


@pytest.fixture
def lambda_context():
    @dataclass
    class LambdaContext:
        function_name: str = "vanity-processor"
        memory_limit_in_mb: int = 128
        invoked_function_arn: str = "arn:aws:lambda:us-east-1:123456789012:function:vanity-processor"
        aws_request_id: str = "da658bd3-2d6f-4e7b-8ec2-937234644fdc"

    return LambdaContext()


@pytest.fixture(autouse=True)
def _fresh_invocation(monkeypatch):
    from vanity_connect import store
    from vanity_connect.observability import metrics

    monkeypatch.setenv("TABLE_NAME", "TestTable")
    monkeypatch.setattr(store, "_DEFAULT_STORE", None)
    yield
    metrics.clear_metrics()
