from typing import List

from .models import GiftIdea


FALLBACK_GIFT_IDEAS = (
    GiftIdea(
        name="Personalized Photo Album",
        description="A custom photo album filled with memories.",
        reason="A thoughtful way to celebrate your relationship and shared memories.",
        price_range="$25-$50",
        where_to_buy=["Shutterfly", "Artifact Uprising", "Etsy"],
        recommended_brands=["Shutterfly", "Artifact Uprising", "Mixbook"],
    ),
    GiftIdea(
        name="Streaming Service Subscription",
        description="A subscription to a premium streaming service.",
        reason="Perfect for entertainment lovers to enjoy their favorite shows and movies.",
        price_range="$15-$20/month",
        where_to_buy=["Netflix", "Disney+", "HBO Max"],
        recommended_brands=["Netflix", "Disney+", "Hulu"],
    ),
    GiftIdea(
        name="Gourmet Chocolate Box",
        description="A selection of premium chocolates in an elegant gift box.",
        reason="A delicious treat that's perfect for chocolate lovers.",
        price_range="$25-$50",
        where_to_buy=["Godiva", "Lindt", "Local Chocolate Shops"],
        recommended_brands=["Godiva", "Ghirardelli", "Lindt"],
    ),
    GiftIdea(
        name="Wireless Earbuds",
        description="High-quality wireless earbuds for music and calls.",
        reason="Great for music lovers and people on the go.",
        price_range="$50-$150",
        where_to_buy=["Amazon", "Best Buy", "Target"],
        recommended_brands=["Apple", "Samsung", "Jabra"],
    ),
    GiftIdea(
        name="Indoor Plant",
        description="A low-maintenance indoor plant in a decorative pot.",
        reason="Brings life to any space and shows thoughtfulness.",
        price_range="$15-$40",
        where_to_buy=["Local Nurseries", "The Sill", "Bloomscape"],
        recommended_brands=["The Sill", "Bloomscape", "Plants.com"],
    ),
)


def fallback_gift_ideas() -> List[GiftIdea]:
    """Fresh copies of the catalog, so callers can't mutate the shared entries."""
    return [g.model_copy(deep=True) for g in FALLBACK_GIFT_IDEAS]
