def slug_to_title(slug: str) -> str:
    """``nail-salons`` -> ``Nail Salons``."""
    return ' '.join(word[:1].upper() + word[1:] for word in slug.split('-') if word)


def slug_to_words(slug: str) -> str:
    return ' '.join(word for word in slug.split('-') if word)
