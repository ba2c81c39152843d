"""
Prometheus metrics configuration
"""
import os

from prometheus_client import (CONTENT_TYPE_LATEST, Counter, Histogram, Info,
                               generate_latest)
from prometheus_client.multiprocess import MultiProcessCollector
from prometheus_client.registry import REGISTRY, CollectorRegistry

from component_naming.core.config import get_settings

# Check if we're in multiprocess mode
if os.environ.get('PROMETHEUS_MULTIPROC_DIR'):
    EXPOSITION_REGISTRY = CollectorRegistry()
    MultiProcessCollector(EXPOSITION_REGISTRY)
else:
    EXPOSITION_REGISTRY = REGISTRY

# ============================================================================
# Rename Pass Metrics
# ============================================================================

component_rename_passes_total = Counter(
    'component_rename_passes_total',
    'Total number of component rename passes',
    ['outcome']  # outcome: 'renamed', 'already_renamed', 'disabled', 'failed'
)

components_renamed_total = Counter(
    'components_renamed_total',
    'Total number of components given a new name',
    ['strategy']
)

component_name_collisions_total = Counter(
    'component_name_collisions_total',
    'Total number of generated component names that collided within a pass',
    ['strategy']
)

component_rename_pass_duration_seconds = Histogram(
    'component_rename_pass_duration_seconds',
    'Component rename pass duration in seconds',
    ['outcome'],
    buckets=(0.0005, 0.001, 0.0025, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25)
)

# ============================================================================
# System Info
# ============================================================================

app_info = Info(
    'app_info',
    'Application information'
)

_settings = get_settings()
app_info.info({
    'app_name': _settings.app_name,
    'app_env': _settings.app_env,
    'version': '0.1.0'
})


def get_metrics():
    """
    Get Prometheus metrics in text format

    Returns:
        bytes: Metrics in Prometheus text format
    """
    return generate_latest(EXPOSITION_REGISTRY)


def get_metrics_content_type():
    """Get content type for Prometheus metrics"""
    return CONTENT_TYPE_LATEST
