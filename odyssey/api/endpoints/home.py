from fastapi import APIRouter, Depends, HTTPException
from loguru import logger

from odyssey.models.home import HomeFeedResponse
from odyssey.services.home_feed import HomeFeedService, get_home_feed_service

router = APIRouter(prefix="/api", tags=["home"])


@router.get("/home", response_model=HomeFeedResponse)
async def get_home(service: HomeFeedService = Depends(get_home_feed_service)) -> HomeFeedResponse:
    """
    Get the curated home page sections.

    Featured holds at most three posts and latest at most four; the two never share a post.
    """
    try:
        return await service.get_home_feed()
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Error building home feed: {e}")
        raise HTTPException(status_code=500, detail=str(e))
