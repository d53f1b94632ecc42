"""
Readiness and liveness probes for the AI Site Generator.

The API process is ready when it can hand a run to a worker: a Gemini
key is configured and the Celery broker answers. Worker presence is not
probed; submitted runs wait in the queue until a worker starts.
"""

import logging
import time
from typing import Any, Dict, List, Optional

import psutil
import redis


logger = logging.getLogger(__name__)

BROKER_PING_TIMEOUT = 2.0


def process_uptime() -> float:
    """Seconds since the current process started."""
    return round(time.time() - psutil.Process().create_time(), 3)


def check_credentials(api_key: Optional[str]) -> Dict[str, Any]:
    if api_key:
        return {"component": "credentials", "status": "healthy"}
    return {
        "component": "credentials",
        "status": "unhealthy",
        "error": "GEMINI_API_KEY is not configured"
    }


def check_broker(broker_url: str) -> Dict[str, Any]:
    """
    Ping the Celery broker.

    Only Redis brokers are pinged; in-memory brokers used by eager mode
    report ``not_configured``.
    """
    scheme = broker_url.split('://', 1)[0]
    if scheme not in ('redis', 'rediss'):
        return {"component": "broker", "status": "not_configured", "broker": scheme}

    client = redis.Redis.from_url(
        broker_url,
        socket_connect_timeout=BROKER_PING_TIMEOUT,
        socket_timeout=BROKER_PING_TIMEOUT
    )
    try:
        client.ping()
    except redis.RedisError as e:
        logger.error(f"Broker ping failed: {str(e)}")
        return {"component": "broker", "status": "unhealthy", "error": str(e)}
    finally:
        client.close()

    return {"component": "broker", "status": "healthy"}


def readiness_issues(api_key: Optional[str], broker_url: str) -> List[Dict[str, Any]]:
    """Failed readiness checks; empty when the process can accept runs."""
    checks = [check_credentials(api_key), check_broker(broker_url)]
    return [check for check in checks if check["status"] == "unhealthy"]
