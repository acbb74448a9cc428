"""cluster-probe.

Checks that a workspace's REST API is reachable with a given token by
listing its compute clusters:
- config: environment-based settings
- observability: structured logging
- models: Pydantic data models
- clients: workspace REST client
- services: the probe, target cluster check and diagnosis
"""

__version__ = "0.1.0"
