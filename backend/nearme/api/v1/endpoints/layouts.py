from fastapi import APIRouter, Depends

from nearme.modules.layouts import LayoutSelector, render_hero
from nearme.multitenancy.deps import get_layout_selector, get_tenant_context
from nearme.multitenancy.tenant_resolution import TenantContext
from nearme.schemas.layout import LayoutOut


router = APIRouter(prefix='/layouts', tags=['layouts'])


@router.get('/current', response_model=LayoutOut)
def get_current_layout(
    ctx: TenantContext = Depends(get_tenant_context),
    layouts: LayoutSelector = Depends(get_layout_selector),
) -> LayoutOut:
    bundle = layouts.select(ctx.category)
    return LayoutOut(
        category=ctx.category,
        dedicated=layouts.has_dedicated(ctx.category),
        bundle=bundle,
        hero=render_hero(bundle, ctx),
    )


@router.get('/{category}', response_model=LayoutOut)
def get_layout(category: str, layouts: LayoutSelector = Depends(get_layout_selector)) -> LayoutOut:
    category = category.strip().lower()
    return LayoutOut(category=category, dedicated=layouts.has_dedicated(category), bundle=layouts.select(category))
