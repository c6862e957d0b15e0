import logging
from os import environ

from uvicorn import run

from mlc.log import configure_logging

logger = logging.getLogger(__name__)


def main() -> None:
    configure_logging()
    tls_cert = environ.get("TLS_CERT") or None
    tls_key = environ.get("TLS_KEY") or None
    if (tls_cert is None) != (tls_key is None):
        raise SystemExit("TLS_CERT and TLS_KEY must be used together")
    if tls_cert is None:
        logger.warning("TLS is not enabled")
    else:
        # session cookies must only travel over TLS from now on
        environ["MLC_TLS_ENABLED"] = "true"
    run(
        "mlc.app:app_factory",
        host=environ.get("HOST", "0.0.0.0"),
        port=int(environ.get("PORT", 8000)),
        # the session key lives in process memory, so one worker only
        workers=1,
        ssl_certfile=tls_cert,
        ssl_keyfile=tls_key,
        factory=True,
        # keep the logging set up by configure_logging
        log_config=None,
    )


if __name__ == "__main__":
    main()
