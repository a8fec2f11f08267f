from .opsgenie_client import OpsgenieClient, get_opsgenie_client

__all__ = ["OpsgenieClient", "get_opsgenie_client"]
