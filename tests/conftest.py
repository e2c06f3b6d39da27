"""Pytest configuration and fixtures for crontext tests."""

import pytest


@pytest.fixture
def valid_expressions():
    """Expressions accepted by the validator."""
    return [
        "@reboot",
        "@yearly",
        "@monthly",
        "@weekly",
        "@daily",
        "@hourly",
        "* * * * *",
        "0 9 * * 1",
        "*/15 * * * *",
        "0 9-17 * * 1-5",
        "0,30 * * * *",
        "2,* * * * *",
        "*,9 * * * *",
        "1-4,9-12 * * * *",
        "5,10-15,*/20 * * * *",
        "*/4,1/10 * * * *",
        "* * * jan-DEC 3",
        "0 0 * */jan *",
        "0 0 * * */sun",
        "0 0 * * 0-7",
        "0 0 * * sun-sat",
        "30 9 * jan-mar mon-fri",
        "0 0 2/5 * *",
        "0-59/7 0-23/5 1-31/3 1-12/2 0-7/3",
        "  5   4 *  * sun  ",
    ]


@pytest.fixture
def invalid_expressions():
    """Expressions rejected by the validator."""
    return [
        "",
        "   ",
        "*",
        "* * * *",
        "* * * * * something",
        "60 * * * *",
        "* 25 * * *",
        "* * 0 * *",
        "* * 32 * *",
        "* * * 13 *",
        "* * * * 8",
        "0-6 * * * fri-4",
        "* * * * mon-sun",
        "7,9-12,3-2/* * * jan-apr/14,3 2",
        "7,9-12,3-2/1 * * jan-apr/14,3 2",
        "1/* * * * *",
        "5-* * * * *",
        "1-2-3 * * * *",
        "1//2 * * * *",
        "*/0 * * * *",
        "-1 * * * *",
        "1.5 * * * *",
        "1,2, * * * *",
        ",1 * * * *",
        "* * * foo *",
        "jan * * * *",
        "@DAILY",
        "@daily * * * *",
        "@never",
    ]
