from .product import Product, ProductListResponse, ProductDetailResponse, ErrorResponse

__all__ = [
	"Product",
	"ProductListResponse",
	"ProductDetailResponse",
	"ErrorResponse",
]