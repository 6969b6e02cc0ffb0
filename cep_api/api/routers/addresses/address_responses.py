"""
Address response mapping utilities.

Transforms domain records and pages into Pydantic response models.

Dependencies: cep_api.core, cep_api.models
System role: Address response transformation
"""

from cep_api.core.address import AddressRecord
from cep_api.core.pagination import Page
from cep_api.models.address import AddressResponse
from cep_api.models.common import PageResponse


def map_address_to_response(record: AddressRecord) -> AddressResponse:
    """
    Transform an AddressRecord into AddressResponse.

    Args:
        record: Stored address (id and created_at assigned)

    Returns:
        AddressResponse: Pydantic model for API response
    """
    return AddressResponse.model_validate(record)


def map_page_to_response(page: Page[AddressRecord]) -> PageResponse[AddressResponse]:
    """
    Transform a page of records into PageResponse.

    Args:
        page: Page returned by the service

    Returns:
        PageResponse[AddressResponse]: Items plus paging metadata
    """
    return PageResponse[AddressResponse](
        content=[map_address_to_response(record) for record in page.items],
        page=page.request.page,
        size=page.request.size,
        sort=page.request.sort,
        total_elements=page.total_elements,
        total_pages=page.total_pages,
        first=page.is_first,
        last=page.is_last,
        has_next=page.has_next,
    )
