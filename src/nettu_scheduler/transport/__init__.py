"""Optional httpx transports to plug into :class:`ClientConfig`.

The client itself never retries. Callers who want retries wrap a transport
and pass it in:

    ```python
    import httpx

    from nettu_scheduler import ClientConfig
    from nettu_scheduler.transport import RetryTransport

    config = ClientConfig(
        base_url="https://scheduler.example.com/api/v1",
        transport=RetryTransport(wrapped_transport=httpx.AsyncHTTPTransport()),
        timeout=10.0,
    )
    ```
"""

from nettu_scheduler.transport.retry import RetryTransport

__all__ = ["RetryTransport"]
