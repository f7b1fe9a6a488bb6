from fastapi import APIRouter, Depends
from fastapi.responses import Response

from app.api.dependencies import get_use_cases

router = APIRouter()


@router.get(
    "/invoice/{booking_number}",
    response_class=Response,
    responses={200: {"content": {"application/pdf": {}}}},
)
async def get_invoice(
    booking_number: str,
    use_cases=Depends(get_use_cases),
) -> Response:
    document = await use_cases["get_invoice"].execute(booking_number=booking_number)
    return Response(
        content=document.content,
        media_type=document.media_type,
        headers={"Content-Disposition": f'attachment; filename="{document.filename}"'},
    )
