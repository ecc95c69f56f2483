"""
API Router.

Combines all endpoints. Routes are served from the application root.
"""

from fastapi import APIRouter

from storefront.api.endpoints import auth, cart, products, uploads

router = APIRouter()

# Include endpoint routers
router.include_router(uploads.router, tags=["Uploads"])
router.include_router(products.router, tags=["Products"])
router.include_router(auth.router, tags=["Auth"])
router.include_router(cart.router, tags=["Cart"])
