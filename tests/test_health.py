"""
Tests for the readiness and liveness probes.
"""

from unittest.mock import MagicMock, patch

import redis

from sitegen.utils.health import check_broker, check_credentials, process_uptime, readiness_issues


def test_process_uptime_is_a_duration():
    with patch('sitegen.utils.health.time.time', return_value=1_700_000_120.0), \
            patch('sitegen.utils.health.psutil.Process') as process:
        process.return_value.create_time.return_value = 1_700_000_000.0
        assert process_uptime() == 120.0


def test_check_credentials():
    assert check_credentials("key")["status"] == "healthy"
    assert check_credentials(None)["status"] == "unhealthy"


def test_check_broker_skips_non_redis_brokers():
    result = check_broker("memory://")

    assert result["status"] == "not_configured"
    assert result["broker"] == "memory"


def test_check_broker_pings_redis():
    client = MagicMock()

    with patch('sitegen.utils.health.redis.Redis.from_url', return_value=client) as from_url:
        result = check_broker("redis://localhost:6379/0")

    assert result["status"] == "healthy"
    client.ping.assert_called_once_with()
    client.close.assert_called_once_with()
    assert from_url.call_args.kwargs["socket_connect_timeout"] == 2.0


def test_unreachable_broker_is_a_readiness_issue():
    client = MagicMock()
    client.ping.side_effect = redis.ConnectionError("Connection refused")

    with patch('sitegen.utils.health.redis.Redis.from_url', return_value=client):
        issues = readiness_issues("key", "redis://localhost:6379/0")

    assert issues == [{"component": "broker", "status": "unhealthy", "error": "Connection refused"}]
    client.close.assert_called_once_with()


def test_ready_when_all_checks_pass():
    assert readiness_issues("key", "memory://") == []
