from api.v1.router.contact import contact_router
from api.v1.router.content import content_router
