"""
Application constants.
"""

API_DESCRIPTION = """
    ## Flood Monitoring Ledger API

    A deterministic ledger of water-level readings and flood alerts:

    * **Providers**: Authorize and revoke data providers
    * **Thresholds**: Per-location river, rainfall and combined flood thresholds
    * **Readings**: Submit sensor readings, evaluated against the thresholds in effect
    * **Alerts**: Per-location flood alerts that escalate while active

    ### Caller identity
    Reading submissions are attributed to the provider named in the
    `X-Provider-ID` header.
    """

# Alert transition labels used in logs and metrics
ALERT_OPENED = "opened"
ALERT_ESCALATED = "escalated"
ALERT_CLEARED = "cleared"
