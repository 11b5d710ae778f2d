"""Demo data generator for ``POST /phones/seed``."""

import random
import secrets

from phone_catalog.domain.entities import Phone

brands = [
    "Apple", "Samsung", "Google", "OnePlus", "Xiaomi", "Sony", "Motorola",
    "Nokia", "Oppo", "Fairphone", "Nothing", "Asus", "Honor", "Realme",
]

series = [
    "Galaxy", "Pixel", "Xperia", "Edge", "Nord", "Zenfone", "Magic", "Find",
    "Redmi", "Phone", "Moto", "Mate",
]

suffixes = ["", " Pro", " Plus", " Ultra", " Lite", " Mini", " Max", " FE"]

features = [
    "a 120 Hz OLED display", "a periscope telephoto camera", "all-day battery life",
    "wireless charging", "an IP68 rating", "a titanium frame", "a repairable design",
    "a 200 MP main sensor", "stereo speakers", "a compact one-handed size",
    "seven years of updates", "a fast under-display fingerprint reader",
]

review_snippets = [
    "Great value for the money.", "Battery easily lasts two days.",
    "Camera struggles a bit in low light.", "Best screen I have used.",
    "Runs warm while gaming.", "Solid build, dated software.",
]


def placeholder_image_url(base: str) -> str:
    """Return a random placeholder image URL under ``base``."""
    return f"{base.rstrip('/')}/{secrets.token_hex(6)}/640/480"


def generate_phone(image_base: str, rng: random.Random | None = None) -> Phone:
    """Build one random, unsaved phone."""
    rng = rng or random.Random()
    brand = rng.choice(brands)
    title = f"{brand} {rng.choice(series)} {rng.randint(3, 16)}{rng.choice(suffixes)}"
    picked = rng.sample(features, 2)
    description = f"The {title} comes with {picked[0]} and {picked[1]}."
    return Phone(
        title=title,
        brand=brand,
        description=description,
        image_url=placeholder_image_url(image_base),
        reviews=rng.choice(review_snippets) if rng.random() < 0.5 else None,
    )


def generate_phones(amount: int, image_base: str, rng: random.Random | None = None) -> list[Phone]:
    rng = rng or random.Random()
    return [generate_phone(image_base, rng) for _ in range(amount)]
