from __future__ import annotations

import asyncio
import json
import logging
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("title", "description", "price", "thumbnail", "code", "stock")


class ProductStoreError(Exception):
	"""Base class for errors raised by the product store."""


class ProductNotFoundError(ProductStoreError, LookupError):
	def __init__(self, product_id: Any):
		super().__init__("Product does not exist")
		self.product_id = product_id


class DuplicateCodeError(ProductStoreError, ValueError):
	def __init__(self, code: Any):
		super().__init__("Product code already exists")
		self.code = code


class StorageWriteError(ProductStoreError, OSError):
	"""The catalog document could not be rewritten."""


class CreateStatus(str, Enum):
	CREATED = "created"
	SKIPPED = "skipped"


@dataclass(frozen=True)
class CreateResult:
	status: CreateStatus
	product: Optional[Dict[str, Any]] = None
	missing: tuple = ()

	@property
	def created(self) -> bool:
		return self.status is CreateStatus.CREATED


class ProductStore:
	"""Product catalog backed by a single JSON document.

	Every mutation rewrites the whole document. Callers serving requests are
	expected to call :meth:`initialize` first so they act on the latest
	durable state rather than on whatever is held in memory.

	The identifier counter is taken from the last record of the loaded
	array, not from the highest id, so documents whose last record does not
	carry the highest id can produce colliding ids after a reload.
	"""

	def __init__(self, path: str | Path):
		self.path = Path(path)
		self.products: List[Dict[str, Any]] = []
		self.last_id = 0

	async def initialize(self) -> None:
		data = await asyncio.to_thread(self._read_document)
		if data is None:
			self.products = []
		elif isinstance(data, list):
			self.products = data
		else:
			logger.warning("Catalog document %s is not a JSON array, starting empty", self.path)
			self.products = []
		self.last_id = self._calculate_last_id()

	def _read_document(self) -> Any:
		try:
			with self.path.open("r", encoding="utf-8") as f:
				return json.load(f)
		except FileNotFoundError:
			logger.info("Catalog document %s not found, starting empty", self.path)
		except (OSError, ValueError) as exc:
			logger.warning("Could not read catalog document %s: %s", self.path, exc)
		return None

	def _calculate_last_id(self) -> int:
		if not self.products:
			return 0
		last = self.products[-1]
		if isinstance(last, dict):
			return last.get("id") or 0
		return 0

	def list(self, limit: Optional[int] = None) -> List[Dict[str, Any]]:
		products = self.products
		if limit is not None and limit > 0:
			products = products[:limit]
		return [dict(p) for p in products]

	def get_by_id(self, product_id: int) -> Dict[str, Any]:
		return dict(self.products[self._index_of(product_id)])

	def _index_of(self, product_id: int) -> int:
		for index, product in enumerate(self.products):
			if product.get("id") == product_id:
				return index
		raise ProductNotFoundError(product_id)

	async def create(self, fields: Mapping[str, Any]) -> CreateResult:
		"""Add a product built from the six required fields.

		A missing or empty required field is not an error: nothing is stored
		and the returned result has status ``SKIPPED``.
		"""
		missing = tuple(name for name in REQUIRED_FIELDS if not fields.get(name))
		if missing:
			logger.warning("All product fields are required, missing: %s", ", ".join(missing))
			return CreateResult(status=CreateStatus.SKIPPED, missing=missing)

		code = fields["code"]
		if any(p.get("code") == code for p in self.products):
			raise DuplicateCodeError(code)

		product = {"id": self.last_id + 1}
		product.update((name, fields[name]) for name in REQUIRED_FIELDS)

		self.products.append(product)
		try:
			await self.persist()
		except StorageWriteError:
			self.products.pop()
			raise
		self.last_id = product["id"]
		logger.info("Created product %s (code=%s)", product["id"], code)
		return CreateResult(status=CreateStatus.CREATED, product=dict(product))

	async def update(self, product_id: int, fields: Mapping[str, Any]) -> Dict[str, Any]:
		index = self._index_of(product_id)
		changes = {k: v for k, v in fields.items() if k != "id"}
		previous = self.products[index]
		self.products[index] = {**previous, **changes}
		try:
			await self.persist()
		except StorageWriteError:
			self.products[index] = previous
			raise
		logger.info("Updated product %s", product_id)
		return dict(self.products[index])

	async def delete(self, product_id: int) -> Dict[str, Any]:
		index = self._index_of(product_id)
		removed = self.products.pop(index)
		try:
			await self.persist()
		except StorageWriteError:
			self.products.insert(index, removed)
			raise
		logger.info("Deleted product %s", product_id)
		return removed

	async def persist(self) -> None:
		payload = json.dumps(self.products, ensure_ascii=False, indent=2)
		try:
			await asyncio.to_thread(self._write_document, payload)
		except OSError as exc:
			logger.error("Failed to write catalog document %s: %s", self.path, exc)
			raise StorageWriteError(f"Failed to write {self.path}: {exc}") from exc

	def _write_document(self, payload: str) -> None:
		tmp_path = self.path.with_name(self.path.name + ".tmp")
		tmp_path.write_text(payload, encoding="utf-8")
		os.replace(tmp_path, self.path)
