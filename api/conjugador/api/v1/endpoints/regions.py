from fastapi import APIRouter
from conjugador.models.enums import REGION_NATIVE_DIALECT, Region
from conjugador.schemas.conjugation import RegionsResponse, RegionResponse
from conjugador.utils.labels import get_region_label

router = APIRouter(prefix="/regions", tags=["regions"])


@router.get("", response_model=RegionsResponse)
async def get_regions():
    """Get all supported regions with their native 2nd-singular system."""
    return RegionsResponse(
        regions=[
            RegionResponse(code=region, name=get_region_label(region), native_dialect=REGION_NATIVE_DIALECT[region])
            for region in Region
        ]
    )
