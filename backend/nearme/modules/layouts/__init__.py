from nearme.modules.layouts.bundles import BUILTIN_BUNDLES, BUSINESS_BUNDLE, DEFAULT_CATEGORY
from nearme.modules.layouts.models import ConfigBundle, HeroCopy, NavItem, StatItem
from nearme.modules.layouts.selector import LayoutSelector, render_hero

__all__ = [
    'BUILTIN_BUNDLES',
    'BUSINESS_BUNDLE',
    'ConfigBundle',
    'DEFAULT_CATEGORY',
    'HeroCopy',
    'LayoutSelector',
    'NavItem',
    'StatItem',
    'render_hero',
]
