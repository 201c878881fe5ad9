import json
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles
from jinja2 import Environment, FileSystemLoader, select_autoescape
from loguru import logger

from odyssey.api.main import api_router
from odyssey.core.cache import cache
from odyssey.services.home_feed import HomeFeedService, get_home_feed_service
from odyssey.services.presentation import meta_keywords

from .config import settings
from .version import __version__


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan events (startup/shutdown).
    """
    yield
    # Only close a feed service that was actually created
    if get_home_feed_service.cache_info().currsize:
        try:
            await get_home_feed_service().close()
            logger.info("Post store client closed")
        except Exception as exc:
            logger.warning(f"Failed to close post store client: {exc}")
    try:
        await cache.close()
        logger.info("Redis cache client closed")
    except Exception as exc:
        logger.warning(f"Failed to close Redis cache client: {exc}")


app = FastAPI(
    title=settings.SITE_NAME,
    description="Curated home page feed for the blog",
    version=__version__,
    lifespan=lifespan,
    docs_url=None if settings.APP_ENV != "development" else "/docs",
    redoc_url=None if settings.APP_ENV != "development" else "/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["GET"],
    allow_headers=["*"],
)


# odyssey/core/app.py -> odyssey/core -> odyssey
package_root = Path(__file__).resolve().parent.parent
static_dir = package_root / "static"
templates_dir = package_root / "templates"

if static_dir.exists():
    app.mount("/static", StaticFiles(directory=str(static_dir)), name="static")

jinja_env = Environment(loader=FileSystemLoader(str(templates_dir)), autoescape=select_autoescape(["html"]))


def _website_ld(request: Request) -> str:
    origin = str(request.base_url).rstrip("/")
    return json.dumps(
        {
            "@context": "https://schema.org",
            "@type": "WebSite",
            "name": settings.SITE_NAME,
            "url": origin,
            "description": settings.SITE_TAGLINE,
            "publisher": {"@type": "Organization", "name": settings.SITE_PUBLISHER},
        }
    )


@app.get("/", response_class=HTMLResponse)
async def home_page(request: Request, service: HomeFeedService = Depends(get_home_feed_service)):
    feed = await service.get_home_feed()

    template = jinja_env.get_template("home.html")
    html_content = template.render(
        request=request,
        app_version=__version__,
        site=settings,
        page_url=str(request.url),
        keywords=meta_keywords(feed.keywords),
        website_ld=_website_ld(request),
        featured=feed.featured,
        latest=feed.latest,
    )
    return HTMLResponse(content=html_content, media_type="text/html")


app.include_router(api_router)
