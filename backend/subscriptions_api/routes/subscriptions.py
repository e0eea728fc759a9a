from typing import List

from fastapi import APIRouter, Depends, Response

from subscriptions_api.dependencies import get_subscription_service
from subscriptions_api.schemas import SubscriptionCreate, SubscriptionResponse
from subscriptions_api.services.subscription_service import SubscriptionService

router = APIRouter()


@router.get("/subscriptions/top", response_model=List[str])
def get_top_subscriptions(service: SubscriptionService = Depends(get_subscription_service)):
    """Up to three service names, most subscribed first"""
    return service.get_top_subscriptions()


@router.post("/subscriptions/users/{user_id}", response_model=SubscriptionResponse, status_code=201)
def add_subscription(
    user_id: int,
    subscription_data: SubscriptionCreate,
    service: SubscriptionService = Depends(get_subscription_service),
):
    """Subscribe a user to a service, creating the service on first use"""
    return service.add_subscription(user_id, subscription_data.service_name)


@router.get("/subscriptions/users/{user_id}", response_model=List[SubscriptionResponse])
def get_user_subscriptions(user_id: int, service: SubscriptionService = Depends(get_subscription_service)):
    """List a user's subscriptions"""
    return service.get_user_subscriptions(user_id)


@router.delete("/subscriptions/{subscription_id}/users/{user_id}", status_code=204)
def delete_subscription(
    subscription_id: int,
    user_id: int,
    service: SubscriptionService = Depends(get_subscription_service),
):
    """Delete a subscription; only its owner may do so"""
    service.delete_subscription(user_id, subscription_id)
    return Response(status_code=204)
