from typing import Any, List
from pydantic import BaseModel, ConfigDict


class Product(BaseModel):
	"""A stored product record, passed through as-is.

	The store only checks that fields are present on create, so values keep
	whatever type they were stored with.
	"""
	model_config = ConfigDict(extra="allow")

	id: Any = None
	title: Any = None
	description: Any = None
	price: Any = None
	thumbnail: Any = None
	code: Any = None
	stock: Any = None


class ProductListResponse(BaseModel):
	products: List[Product]


class ProductDetailResponse(BaseModel):
	product: Product


class ErrorResponse(BaseModel):
	error: str
