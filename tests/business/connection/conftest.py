"""
Pytest fixtures for connection tests.

Raw records shaped like the upstream API (camelCase keys, decimal strings).
"""

import pytest


def symbol_record(symbol_id, symbol, category="FOREX", **overrides):
    record = {
        "symbolId": symbol_id,
        "symbol": {"symbol": symbol, "displayName": symbol, "category": category},
        "commissionPerLot": "0",
        "pipValuePerLot": "10",
        "spreadTypical": "0",
        "isAvailable": True,
    }
    record.update(overrides)
    return record


@pytest.fixture
def propfirm_configs():
    return [
        symbol_record("sym-eurusd", "EURUSD", commissionPerLot="2"),
        symbol_record("sym-us30", "US30", category="INDICES"),
        symbol_record("sym-usdjpy", "USDJPY", isAvailable=False),
    ]


@pytest.fixture
def broker_configs():
    return [
        symbol_record("sym-gbpusd", "GBPUSD", commissionPerLot="3"),
        symbol_record("sym-eurusd", "EURUSD", commissionPerLot="3", spreadTypical="1"),
    ]


@pytest.fixture
def connection():
    return {
        "propfirmAccount": {
            "initialBalance": "10000",
            "currentBalance": "10000",
            "accountCost": "10000",
            "trades": [
                {
                    "id": "pf-1",
                    "symbol": {"id": "sym-eurusd"},
                    "netProfit": "150",
                    "commission": "-6",
                    "status": "CLOSED",
                    "openTime": "2025-03-03T09:15:00Z",
                    "createdAt": "2025-03-03T09:15:02Z",
                },
                {
                    "id": "pf-2",
                    "symbol": {"id": "sym-eurusd"},
                    "netProfit": "-150",
                    "commission": "4",
                    "status": "CLOSED",
                    "openTime": "2025-03-04T14:30:00Z",
                    "createdAt": "2025-03-04T14:30:01Z",
                },
            ],
        },
        "brokerAccount": {
            "currentBalance": "2500",
            "trades": [
                {
                    "id": "bk-1",
                    "symbol": {"id": "sym-eurusd"},
                    "netProfit": "-45",
                    "status": "CLOSED",
                    "openTime": "2025-03-03T09:15:00Z",
                    "createdAt": "2025-03-03T09:15:20Z",
                },
                {
                    "id": "bk-2",
                    "symbol": {"id": "sym-eurusd"},
                    "netProfit": "40",
                    "status": "CLOSED",
                    "openTime": "2025-03-04T14:30:00Z",
                    "createdAt": "2025-03-04T14:32:00Z",
                },
            ],
        },
    }


@pytest.fixture
def rules():
    return {"maxDrawdown": "10", "dailyDrawdown": "5", "profitTarget": "8"}
