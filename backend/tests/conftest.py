"""Pytest fixtures for the product store and the HTTP routes."""

import json
import os

import pytest

# Keep test runs from creating a logs/ directory
os.environ.setdefault("LOG_DIR", "")

from catalog_api.core.config import Settings
from catalog_api.services.product_store import ProductStore


def make_product(n, **overrides):
	product = {
		"title": f"Product {n}",
		"description": f"Description {n}",
		"price": 10 * n,
		"thumbnail": f"img/{n}.png",
		"code": f"C{n}",
		"stock": n,
	}
	product.update(overrides)
	return product


@pytest.fixture
def data_file(tmp_path):
	return tmp_path / "products.json"


@pytest.fixture
def store(data_file):
	return ProductStore(data_file)


@pytest.fixture
def write_catalog(data_file):
	"""Write a list of records straight to the catalog document."""
	def _write(records):
		data_file.write_text(json.dumps(records, indent=2), encoding="utf-8")
		return records
	return _write


@pytest.fixture
def settings(data_file):
	return Settings(data_file=str(data_file), log_dir="")
