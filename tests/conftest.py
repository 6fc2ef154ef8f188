"""Shared fixtures: fresh inventories and consoles that write into a buffer."""

import io

import pytest
from rich.console import Console

from drinkbar.inventory import Inventory
from drinkbar.presenter import InventoryPresenter


def make_console() -> Console:
    """Plain-text console backed by a StringIO (read it via console.file)."""
    return Console(file=io.StringIO(), highlight=False, soft_wrap=True, color_system=None)


@pytest.fixture
def inv():
    return Inventory()


@pytest.fixture
def out():
    return make_console()


@pytest.fixture
def presenter(inv, out):
    return InventoryPresenter(inv, out)
