from fastapi import APIRouter

from bug_relay.api.v1 import slack

api_router = APIRouter()

api_router.include_router(slack.router)
