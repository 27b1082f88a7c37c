"""
Pytest fixtures for CLI tests.
"""

import pytest
import yaml
from click.testing import CliRunner


SCENARIO = {
    "connection": {
        "propfirmAccount": {
            "initialBalance": "10000",
            "accountCost": "10000",
            "trades": [
                {
                    "id": "pf-1",
                    "symbol": {"id": "sym-eurusd"},
                    "netProfit": "100",
                    "status": "CLOSED",
                    "openTime": "2025-03-03T09:15:00Z",
                    "createdAt": "2025-03-03T09:15:02Z",
                },
            ],
        },
        "brokerAccount": {
            "currentBalance": "2500",
            "trades": [
                {
                    "id": "bk-1",
                    "symbol": {"id": "sym-eurusd"},
                    "netProfit": "-40",
                    "status": "CLOSED",
                    "openTime": "2025-03-03T09:15:00Z",
                    "createdAt": "2025-03-03T09:15:10Z",
                },
            ],
        },
    },
    "rules": {"maxDrawdown": "10", "dailyDrawdown": "5", "profitTarget": "8"},
    "symbol_configs": {
        "propfirm": [
            {
                "symbolId": "sym-eurusd",
                "symbol": {"symbol": "EURUSD", "category": "FOREX"},
                "commissionPerLot": "2",
                "pipValuePerLot": "10",
            },
        ],
        "broker": [
            {
                "symbolId": "sym-eurusd",
                "symbol": {"symbol": "EURUSD", "category": "FOREX"},
                "commissionPerLot": "3",
                "pipValuePerLot": "10",
                "spreadTypical": "1",
            },
            {
                "symbolId": "sym-gbpusd",
                "symbol": {"symbol": "GBPUSD", "category": "FOREX"},
                "commissionPerLot": "3",
                "pipValuePerLot": "10",
            },
        ],
    },
    "symbol_id": "sym-eurusd",
    "inputs": {"pipsStop": 20, "operationRiskPercent": 1, "capitalMode": "MANUAL"},
}


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def write_scenario(tmp_path):
    """Write a scenario file, applying top-level overrides."""

    def _write(**overrides):
        data = {**SCENARIO, **overrides}
        path = tmp_path / "scenario.yaml"
        path.write_text(yaml.safe_dump(data, sort_keys=False))
        return str(path)

    return _write
