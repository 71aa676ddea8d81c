# lambda/vanity_connect/observability.py
from typing import Optional

from aws_lambda_powertools import Logger, Tracer, Metrics
from aws_lambda_powertools.metrics import MetricUnit

from . import config

# Service names show up in logs/traces/metrics
logger  = Logger(service="vanity-processor")
tracer  = Tracer(service="vanity-processor")
metrics = Metrics(namespace="VanityConnect")


def add_call_dimensions(connect_instance_id: Optional[str]):
    """
    Dimensions let you break metrics down by service/env/instance.
    Call once per invocation, before any record_* helper.
    """
    metrics.add_dimension(name="service", value="vanity-processor")
    metrics.add_dimension(name="env", value=config.env())
    metrics.add_dimension(name="connectInstanceId", value=connect_instance_id or "unknown")


def record_success(candidates_count: int):
    """
    Emit business KPIs for a successfully processed call:
      - CallsProcessed: count of processed calls
      - CandidatesGenerated: how many vanity options we produced
    """
    metrics.add_metric(name="CallsProcessed", unit=MetricUnit.Count, value=1)
    metrics.add_metric(name="CandidatesGenerated", unit=MetricUnit.Count, value=candidates_count)


def record_invalid_caller():
    metrics.add_metric(name="InvalidCallerNumber", unit=MetricUnit.Count, value=1)


def record_write_error():
    metrics.add_metric(name="DdbWriteErrors", unit=MetricUnit.Count, value=1)


def record_error():
    """
    Emit an error counter for failed processing paths.
    """
    metrics.add_metric(name="Errors", unit=MetricUnit.Count, value=1)
