from nearme.services import (
    bootstrap_service,
    directory_service,
    seo_service,
)

__all__ = [
    'bootstrap_service',
    'directory_service',
    'seo_service',
]
