"""Customer Routes: CRUD over /customers, guarded by bearer tokens.

Invariants:
    - POST /customers -> 201 with a Location header; a client-supplied id is ignored
    - GET /customers/{id} -> 200 with the customer, 404 when absent
    - PUT /customers/{id} -> 204 on whole-entity replace, 404 when absent;
      the path id wins over any id in the body
    - DELETE /customers/{id} -> 204 whether or not the customer existed
    - A path id that is not a valid identifier names no customer
    - Response bodies omit None fields
"""

import logging
from contextlib import aclosing

from fastapi import APIRouter, Depends, Request, Response, status

from customer_service.api.dependencies import get_customer_repository, require_bearer_token
from customer_service.core.customer import Customer
from customer_service.core.domain_types import parse_customer_id
from customer_service.core.errors import ResourceNotFoundError
from customer_service.core.repository_protocols import CustomerRepository
from customer_service.schemas.customer import CustomerPayload

logger = logging.getLogger(__name__)
router = APIRouter(
    prefix="/customers",
    tags=["customers"],
    dependencies=[Depends(require_bearer_token)],
)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_customer(
    body: CustomerPayload,
    request: Request,
    repo: CustomerRepository = Depends(get_customer_repository),
):
    """Create a customer; its URL is returned in the Location header."""
    customer = Customer.from_customer(body.to_domain()).with_id(None).build()
    saved = await repo.save(customer)
    location = str(request.url_for("get_customer", customer_id=str(saved.id)))
    logger.info(f"Customer created at {location}", extra={"customer_id": saved.id})
    return Response(
        status_code=status.HTTP_201_CREATED, headers={"Location": location},
    )


@router.get(
    "", response_model=list[CustomerPayload], response_model_exclude_none=True,
)
async def list_customers(
    repo: CustomerRepository = Depends(get_customer_repository),
):
    async with aclosing(repo.find_all()) as customers:
        return [CustomerPayload.from_domain(c) async for c in customers]


@router.get(
    "/{customer_id}",
    response_model=CustomerPayload,
    response_model_exclude_none=True,
)
async def get_customer(
    customer_id: str,
    repo: CustomerRepository = Depends(get_customer_repository),
):
    parsed = parse_customer_id(customer_id)
    customer = await repo.find_by_id(parsed) if parsed else None
    if customer is None:
        raise ResourceNotFoundError("Customer", customer_id)
    return CustomerPayload.from_domain(customer)


@router.put("/{customer_id}", status_code=status.HTTP_204_NO_CONTENT)
async def replace_customer(
    customer_id: str,
    body: CustomerPayload,
    repo: CustomerRepository = Depends(get_customer_repository),
):
    """Replace every field of an existing customer with the body."""
    parsed = parse_customer_id(customer_id)
    if parsed is None or not await repo.exists_by_id(parsed):
        raise ResourceNotFoundError("Customer", customer_id)
    customer = Customer.from_customer(body.to_domain()).with_id(parsed).build()
    await repo.save(customer)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{customer_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_customer(
    customer_id: str,
    repo: CustomerRepository = Depends(get_customer_repository),
):
    parsed = parse_customer_id(customer_id)
    if parsed is not None:
        await repo.delete_by_id(parsed)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
