"""
Wrapper script for running the server with uvicorn.

Monitoring endpoints (/health, /metrics) are filtered out of the access log.
"""

if __name__ == "__main__":
    import logging

    import uvicorn

    from simplybooks.uvicorn_filters import ExcludeMetricsFilter

    logging.getLogger("uvicorn.access").addFilter(ExcludeMetricsFilter())

    uvicorn.run("simplybooks:application", factory=True, host="0.0.0.0", port=8000)
