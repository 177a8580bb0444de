from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from datetime import date
from typing import Callable, Mapping

from autohaus.domain.errors import ServiceUnavailableError
from autohaus.domain.facets import FacetOptions
from autohaus.domain.filters import FilterQuery, normalize_filters
from autohaus.domain.paging import PageRequest, Pagination
from autohaus.domain.sorting import DEFAULT_SORT, SortOrder, resolve_sort
from autohaus.domain.vehicle import Vehicle, VehicleKind
from autohaus.ports.errors import StorageError
from autohaus.ports.vehicle_repository import VehicleRepository
from autohaus.use_cases.compute_facets import ComputeFacets

logger = logging.getLogger(__name__)

DEGRADED_WARNING = "Some filters may not be working properly."


@dataclass(frozen=True, slots=True)
class ListVehiclesRequest:
    kind: VehicleKind
    params: Mapping[str, str] = field(default_factory=dict)
    include_all_statuses: bool = False  # admin listings


@dataclass(frozen=True, slots=True)
class ListVehiclesResponse:
    vehicles: list[Vehicle]
    pagination: Pagination
    facets: FacetOptions
    filters: FilterQuery
    sort: SortOrder
    current_filters: dict[str, str]
    warning: str | None = None


class ListVehicles:
    """
    Catalog listing: filter, sort, page and describe the inventory of one kind.

    Flow:
    1. Normalise filters, resolve the ordering and the page window
    2. Count and fetch the page concurrently
    3. Compute facets for the filter UI
    4. Compose pagination metadata

    A storage failure on the filtered query triggers one retry with the
    unfiltered default view and a warning. Only when that also fails does the
    request fail with ServiceUnavailableError.
    """

    def __init__(
        self,
        vehicle_repository: VehicleRepository,
        compute_facets: ComputeFacets | None = None,
        clock: Callable[[], date] = date.today,
    ) -> None:
        self._repository = vehicle_repository
        self._compute_facets = compute_facets or ComputeFacets(vehicle_repository, clock=clock)
        self._clock = clock

    def execute(self, request: ListVehiclesRequest) -> ListVehiclesResponse:
        """
        Execute the listing.

        Args:
            request: Vehicle kind plus raw query parameters

        Returns:
            ListVehiclesResponse with the page, pagination, facets and an
            optional non-fatal warning

        Raises:
            ServiceUnavailableError: If both the query and its fallback fail
        """
        today = self._clock()
        filters = normalize_filters(
            request.params,
            request.kind,
            include_all_statuses=request.include_all_statuses,
            today=today,
        )
        order = resolve_sort(request.params, request.kind, filters.sort_hint)
        page = PageRequest.from_params(request.params)
        warning: str | None = None

        try:
            vehicles, total = self._fetch_page(filters, order, page)
        except StorageError as exc:
            logger.warning(
                "Filtered catalog query failed, falling back to default view",
                exc_info=exc,
                extra={"kind": request.kind.value, "params": dict(request.params)},
            )
            warning = DEGRADED_WARNING
            filters = filters.scope_only()
            order = DEFAULT_SORT
            page = PageRequest()
            try:
                vehicles, total = self._fetch_page(filters, order, page)
            except StorageError as fallback_exc:
                logger.error(
                    "Fallback catalog query failed",
                    exc_info=fallback_exc,
                    extra={"kind": request.kind.value},
                )
                raise ServiceUnavailableError(
                    "The vehicle catalog is temporarily unavailable. Please try again later."
                ) from fallback_exc

        try:
            facets = self._compute_facets.execute(request.kind)
        except StorageError as exc:
            logger.warning(
                "Facet aggregation failed, using defaults",
                exc_info=exc,
                extra={"kind": request.kind.value},
            )
            facets = FacetOptions.empty(today)
            warning = DEGRADED_WARNING

        return ListVehiclesResponse(
            vehicles=vehicles,
            pagination=Pagination.build(page, total),
            facets=facets,
            filters=filters,
            sort=order,
            current_filters={key: str(value) for key, value in request.params.items()},
            warning=warning,
        )

    def _fetch_page(
        self, filters: FilterQuery, order: SortOrder, page: PageRequest
    ) -> tuple[list[Vehicle], int]:
        with ThreadPoolExecutor(max_workers=2) as pool:
            count_future = pool.submit(self._repository.count, filters)
            find_future = pool.submit(
                self._repository.find, filters, order, page.skip, page.size
            )
            return find_future.result(), count_future.result()
