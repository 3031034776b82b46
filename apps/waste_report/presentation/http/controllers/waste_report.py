"""Waste Report API Controller.

엔드포인트:
- POST /waste-reports: 신고 접수 (분류 → 구역 검사 → 저장 → 포인트 → 알림)
- GET /waste-reports: 내 신고 목록
- GET /waste-reports/waste-types: 폐기물 유형별 배출 방법
- GET /waste-reports/{report_id}: 내 신고 단건
- POST /classify-waste: 구 클라이언트 경로 (신고 접수와 동일)
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Body, Header, Query
from fastapi.responses import PlainTextResponse

from waste_report.application.report.commands import SubmitReportRequest
from waste_report.infrastructure.auth.jwt_identity_verifier import strip_bearer
from waste_report.presentation.http.schemas import (
    SubmitReportBody,
    SubmitReportResponseSchema,
    WasteReportListSchema,
    WasteReportSchema,
    WasteTypeSchema,
)
from waste_report.setup.dependencies import (
    CurrentUserDep,
    GetReportQueryDep,
    GetWasteTypesQueryDep,
    ListReportsQueryDep,
    SubmitCommandDep,
)

router = APIRouter(prefix="/waste-reports", tags=["waste-reports"])
legacy_router = APIRouter(tags=["waste-reports"], include_in_schema=False)

async def _submit(
    body: SubmitReportBody | None,
    command: SubmitCommandDep,
    authorization: str | None,
) -> SubmitReportResponseSchema:
    body = body or SubmitReportBody()
    request = SubmitReportRequest(
        auth_token=strip_bearer(authorization),
        image_base64=body.image,
        latitude=body.latitude,
        longitude=body.longitude,
        filename=body.filename,
    )
    response = await command.execute(request)

    return SubmitReportResponseSchema(
        status=response.status,
        report_id=response.report_id,
        waste_type=response.waste_type,
        disposal_method=response.disposal_method,
        confidence=response.confidence,
        eco_points_awarded=response.eco_points_awarded,
        gps_location=response.gps_location,
        is_illegal_dumping=response.is_illegal_dumping,
        message=response.message,
        points_credited=response.points_credited,
        notification=response.notification,
    )


@router.post(
    "",
    response_model=SubmitReportResponseSchema,
    summary="Submit a waste report",
    responses={
        400: {"description": "필수 입력 누락, 좌표 범위 위반, 이미지 디코딩 실패"},
        401: {"description": "인증 실패"},
        413: {"description": "이미지 크기 초과"},
        500: {"description": "이미지 업로드 또는 신고 저장 실패"},
    },
)
async def submit_report(
    command: SubmitCommandDep,
    body: Annotated[SubmitReportBody | None, Body()] = None,
    authorization: Annotated[str | None, Header()] = None,
) -> SubmitReportResponseSchema:
    """폐기물 사진과 좌표로 신고를 접수합니다.

    분류 결과, 배출 방법, 지급 포인트, 불법투기 여부를 반환합니다.
    """
    return await _submit(body, command, authorization)


@router.options("", include_in_schema=False)
async def submit_report_options() -> PlainTextResponse:
    return PlainTextResponse("ok")


@router.get("", response_model=WasteReportListSchema, summary="List my waste reports")
async def list_reports(
    user: CurrentUserDep,
    query: ListReportsQueryDep,
    limit: Annotated[int, Query(ge=1, le=100)] = 20,
) -> WasteReportListSchema:
    reports = await query.execute(user.user_id, limit)
    items = [WasteReportSchema.from_entity(report) for report in reports]
    return WasteReportListSchema(items=items, count=len(items))


@router.get("/waste-types", response_model=list[WasteTypeSchema], summary="Disposal guide")
async def get_waste_types(query: GetWasteTypesQueryDep) -> list[WasteTypeSchema]:
    """폐기물 유형별 배출 방법 (인증 불필요)."""
    return [
        WasteTypeSchema(waste_type=guide.waste_type, disposal_method=guide.disposal_method)
        for guide in query.execute()
    ]


@router.get("/{report_id}", response_model=WasteReportSchema, summary="Get my waste report")
async def get_report(
    report_id: str,
    user: CurrentUserDep,
    query: GetReportQueryDep,
) -> WasteReportSchema:
    """본인 신고 단건 조회. 타인의 신고는 404."""
    report = await query.execute(user.user_id, report_id)
    return WasteReportSchema.from_entity(report)


@legacy_router.post("/classify-waste", response_model=SubmitReportResponseSchema)
async def classify_waste(
    command: SubmitCommandDep,
    body: Annotated[SubmitReportBody | None, Body()] = None,
    authorization: Annotated[str | None, Header()] = None,
) -> SubmitReportResponseSchema:
    return await _submit(body, command, authorization)


@legacy_router.options("/classify-waste")
async def classify_waste_options() -> PlainTextResponse:
    return PlainTextResponse("ok")
