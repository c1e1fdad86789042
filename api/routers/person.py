from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from fastapi.responses import PlainTextResponse

from api.core.config import get_settings
from api.domain.person_filters import FilterCriteria
from api.schemas.person import PageResult, PersonPage, PersonView
from api.services import person_mapper
from api.services.person_service import InvalidArgumentError, Page, PersonService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/person", tags=["person"])

DEFAULT_SORT_FIELD = "numberPassport"
DEFAULT_SORT_DIRECTION = "asc"


@dataclass(frozen=True)
class PageParams:
    page: int
    size: int
    sort_field: str
    sort_direction: str


def _get_person_service(request: Request) -> PersonService:
    svc = getattr(getattr(request.app, "state", None), "person_service", None)
    if not svc:
        raise RuntimeError("PersonService not configured")
    return svc


def _bad_request(request: Request, exc: InvalidArgumentError) -> HTTPException:
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc)
    return HTTPException(400, str(exc))


def _page_result(page: Page[PersonView]) -> PageResult:
    return PageResult(
        content=page.content,
        page_number=page.page_number,
        page_size=page.page_size,
        total_pages=page.total_pages,
        total_elements=page.total_elements,
    )


def _page_params(
    page: int = Query(0),
    size: Optional[int] = Query(None, description="Defaults to DEFAULT_PAGE_SIZE"),
    sort_field: str = Query(DEFAULT_SORT_FIELD, alias="sortField"),
    sort_direction: str = Query(DEFAULT_SORT_DIRECTION, alias="sortDirection"),
) -> PageParams:
    if size is None:
        size = get_settings().default_page_size
    return PageParams(page=page, size=size, sort_field=sort_field, sort_direction=sort_direction)


def _filter_criteria(
    paging: PageParams = Depends(_page_params),
    number_passport: Optional[int] = Query(None, alias="numberPassport"),
    name: Optional[str] = Query(None),
    surname: Optional[str] = Query(None),
    age: Optional[int] = Query(None),
    sex: Optional[str] = Query(None),
    start_age: Optional[int] = Query(None, alias="startAge"),
    finish_age: Optional[int] = Query(None, alias="finishAge"),
) -> FilterCriteria:
    return FilterCriteria(
        number_passport=number_passport,
        name=name,
        surname=surname,
        age=age,
        sex=sex,
        start_age=start_age,
        finish_age=finish_age,
        page=paging.page,
        size=paging.size,
        sort_field=paging.sort_field,
        sort_direction=paging.sort_direction,
    )


@router.get("/create-count/{count}", response_class=PlainTextResponse)
def create_count(count: int, request: Request):
    svc = _get_person_service(request)
    try:
        return svc.create_random_persons(count)
    except InvalidArgumentError as exc:
        raise _bad_request(request, exc)


@router.post("/create", response_model=PersonView)
def create_person(view: PersonView, request: Request):
    svc = _get_person_service(request)
    return svc.create_person(view)


@router.get("/getAll", response_model=List[PersonView])
def get_all(request: Request):
    return _get_person_service(request).find_all_persons()


@router.get("/getAllPages", response_model=PersonPage)
def get_all_pages(request: Request, paging: PageParams = Depends(_page_params)):
    svc = _get_person_service(request)
    try:
        result = svc.find_all_persons_page(paging.page, paging.size, paging.sort_field, paging.sort_direction)
    except InvalidArgumentError as exc:
        raise _bad_request(request, exc)
    return PersonPage(
        content=[person_mapper.to_read(entity) for entity in result.content],
        page_number=result.page_number,
        page_size=result.page_size,
        total_pages=result.total_pages,
        total_elements=result.total_elements,
        number_of_elements=result.number_of_elements,
        first=result.first,
        last=result.last,
    )


@router.get("/getAllDto", response_model=PageResult)
def get_all_dto(request: Request, paging: PageParams = Depends(_page_params)):
    svc = _get_person_service(request)
    try:
        result = svc.find_all_persons_page_dto(paging.page, paging.size, paging.sort_field, paging.sort_direction)
    except InvalidArgumentError as exc:
        raise _bad_request(request, exc)
    return _page_result(result)


@router.get("/getAll-filter", response_model=PageResult)
def get_all_filtered(request: Request, criteria: FilterCriteria = Depends(_filter_criteria)):
    svc = _get_person_service(request)
    try:
        result = svc.find_all_persons_page_dto_filtered(criteria)
    except InvalidArgumentError as exc:
        raise _bad_request(request, exc)
    return _page_result(result)
