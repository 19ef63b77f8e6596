"""Text formatting utilities."""


def format_price(price: float) -> str:
    return f"${price:,.2f}"


def format_rating(rating: float, max_stars: int = 5) -> str:
    filled = max(0, min(max_stars, int(round(rating))))
    return "★" * filled + "☆" * (max_stars - filled)


def truncate_text(text: str, max_length: int = 100) -> str:
    if len(text) <= max_length:
        return text
    return text[:max_length] + "..."
