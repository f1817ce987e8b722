from .product_store import (
	CreateResult,
	CreateStatus,
	DuplicateCodeError,
	ProductNotFoundError,
	ProductStore,
	ProductStoreError,
	StorageWriteError,
)

__all__ = [
	"CreateResult",
	"CreateStatus",
	"DuplicateCodeError",
	"ProductNotFoundError",
	"ProductStore",
	"ProductStoreError",
	"StorageWriteError",
]