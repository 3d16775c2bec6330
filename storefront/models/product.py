# ==============================================
# Product Details Models
# ==============================================
#
# PURPOSE:
#   Catalog records shown on the product page: the product itself,
#   its category, comments, ratings and the review form.
#
# DECODING NOTES:
#   Catalog data is display-only, so these records are lenient
#   where the cart/order records are strict:
#     - price parses from text and falls back to 0.0
#     - stock parses from text; a missing key reads as 0, a null or
#       unparsable value reads as None
#     - comment timestamps fall back to "now" instead of failing
#   The API sends snake_case keys (name_ar, image_url, images, ...).
#   The camelCase spellings written by to_dict() are accepted too so
#   that a serialized record decodes back to itself.
#
# CLASSES:
# --------
# - ProductCategory
# - ProductDetailsData
# - ProductUserData
# - ProductUserRating
# - ProductRatingData
# - ProductCommentData
# - ProductReviewFormData
#
# ==============================================

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Tuple

from storefront.normalization import FieldKeys, PayloadReader, ValueCoercer
from .base import Record


DEFAULT_REVIEW_RATING = 5

CATEGORY_KEYS = FieldKeys({
    "name_ar": ("name_ar", "nameAr"),
})

PRODUCT_KEYS = FieldKeys({
    "name_ar": ("name_ar", "nameAr"),
    "description_ar": ("description_ar", "descriptionAr"),
    "image_url": ("image_url", "imageUrl", "image"),
    "image_urls": ("images", "imageUrls"),
})

USER_RATING_KEYS = FieldKeys({
    "user_id": ("user_id", "userId"),
})

RATING_KEYS = FieldKeys({
    "average_rating": ("average_rating", "averageRating"),
    "total_ratings": ("total_ratings", "totalRatings"),
    "user_rating": ("user_rating", "userRating"),
})

COMMENT_KEYS = FieldKeys({
    "user_id": ("user_id", "userId"),
    "created_at": ("created_at", "createdAt"),
})


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class ProductCategory(Record):
    id: str
    name: str
    name_ar: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping) -> "ProductCategory":
        reader = PayloadReader("ProductCategory", data, CATEGORY_KEYS)
        return cls(
            id=reader.string("id"),
            name=reader.string("name"),
            name_ar=reader.optional_string("name_ar"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "nameAr": self.name_ar,
        }


@dataclass(frozen=True)
class ProductDetailsData(Record):
    """
    A product as shown on its detail page.

    `name_ar` / `description_ar` are the Arabic variants of the
    name and description.
    """
    id: str
    name: str
    price: float = 0.0
    description: Optional[str] = None
    image_url: Optional[str] = None
    image_urls: Optional[Tuple[str, ...]] = None
    stock: Optional[int] = None
    category: Optional[ProductCategory] = None
    name_ar: Optional[str] = None
    description_ar: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping) -> "ProductDetailsData":
        reader = PayloadReader("ProductDetailsData", data, PRODUCT_KEYS)
        return cls(
            id=reader.string("id"),
            name=reader.string("name"),
            name_ar=reader.optional_string("name_ar"),
            description=reader.optional_string("description"),
            description_ar=reader.optional_string("description_ar"),
            price=reader.tolerant_float("price", default=0.0),
            stock=reader.tolerant_int("stock", default=None, missing=0),
            image_url=reader.optional_string("image_url"),
            image_urls=reader.strings("image_urls"),
            category=reader.nested("category", ProductCategory.from_dict),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "nameAr": self.name_ar,
            "description": self.description,
            "descriptionAr": self.description_ar,
            "price": self.price,
            "imageUrl": self.image_url,
            "imageUrls": list(self.image_urls) if self.image_urls is not None else None,
            "stock": self.stock,
            "category": self.category.to_dict() if self.category else None,
        }


@dataclass(frozen=True)
class ProductUserData(Record):
    """Author shown next to a product comment."""
    id: str
    name: str

    @classmethod
    def from_dict(cls, data: Mapping) -> "ProductUserData":
        reader = PayloadReader("ProductUserData", data)
        return cls(
            id=reader.string("id"),
            name=reader.string("name", default="User"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name}


@dataclass(frozen=True)
class ProductUserRating(Record):
    """The signed-in user's own rating of a product."""
    user_id: str
    rating: int

    @classmethod
    def from_dict(cls, data: Mapping) -> "ProductUserRating":
        reader = PayloadReader("ProductUserRating", data, USER_RATING_KEYS)
        return cls(
            user_id=reader.string("user_id"),
            rating=reader.tolerant_int("rating", default=0, missing=0),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"userId": self.user_id, "rating": self.rating}


@dataclass(frozen=True)
class ProductRatingData(Record):
    average_rating: float = 0.0
    total_ratings: int = 0
    user_rating: Optional[ProductUserRating] = None

    @classmethod
    def from_dict(cls, data: Mapping) -> "ProductRatingData":
        reader = PayloadReader("ProductRatingData", data, RATING_KEYS)
        return cls(
            average_rating=reader.tolerant_float("average_rating", default=0.0),
            total_ratings=reader.tolerant_int("total_ratings", default=0, missing=0),
            user_rating=reader.nested("user_rating", ProductUserRating.from_dict),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "averageRating": self.average_rating,
            "totalRatings": self.total_ratings,
            "userRating": self.user_rating.to_dict() if self.user_rating else None,
        }


@dataclass(frozen=True)
class ProductCommentData(Record):
    id: str
    comment: str
    created_at: datetime
    user_id: Optional[str] = None
    user: Optional[ProductUserData] = None
    rating: int = DEFAULT_REVIEW_RATING

    @classmethod
    def from_dict(cls, data: Mapping) -> "ProductCommentData":
        reader = PayloadReader("ProductCommentData", data, COMMENT_KEYS)
        return cls(
            id=reader.string("id"),
            user_id=reader.string("user_id"),
            user=reader.nested("user", ProductUserData.from_dict),
            comment=reader.string("comment"),
            created_at=reader.lenient_timestamp("created_at", _utc_now),
            rating=reader.tolerant_int("rating", default=0, missing=DEFAULT_REVIEW_RATING),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "userId": self.user_id,
            "user": self.user.to_dict() if self.user else None,
            "comment": self.comment,
            "createdAt": ValueCoercer.format_timestamp(self.created_at),
            "rating": self.rating,
        }


@dataclass(frozen=True)
class ProductReviewFormData(Record):
    """Draft review typed into the product page form."""
    rating: int = DEFAULT_REVIEW_RATING
    comment: str = ""

    @classmethod
    def from_dict(cls, data: Mapping) -> "ProductReviewFormData":
        reader = PayloadReader("ProductReviewFormData", data)
        return cls(
            rating=reader.tolerant_int(
                "rating", default=DEFAULT_REVIEW_RATING, missing=DEFAULT_REVIEW_RATING,
            ),
            comment=reader.string("comment"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"rating": self.rating, "comment": self.comment}
