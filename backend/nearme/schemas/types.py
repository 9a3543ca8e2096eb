from __future__ import annotations

from typing import Annotated

from pydantic import BeforeValidator

from nearme.multitenancy.cities import normalize_city_key
from nearme.multitenancy.hostname import normalize_host, valid_slug


def _validate_hostname(value: str) -> str:
    if not isinstance(value, str):
        raise TypeError('Hostname must be a string')

    host = normalize_host(value)
    if not host or len(host) > 253:
        raise ValueError('Enter a valid hostname')
    if not all(valid_slug(label) or (label.isalnum() and label.isascii()) for label in host.split('.')):
        raise ValueError('Enter a valid hostname')
    return host


def _validate_slug(value: str) -> str:
    if not isinstance(value, str):
        raise TypeError('Slug must be a string')

    slug = normalize_city_key(value)
    if not valid_slug(slug):
        raise ValueError('Use 2-63 lowercase letters, digits or hyphens')
    return slug


Hostname = Annotated[str, BeforeValidator(_validate_hostname)]
Slug = Annotated[str, BeforeValidator(_validate_slug)]
