# travel_advisor/api/deps.py
from functools import lru_cache

from fastapi import Depends

from travel_advisor.services.generation_service import GenerationService, OpenAIGenerationService
from travel_advisor.services.request_router import RequestRouter
from travel_advisor.services.travel_agent import TravelAgent


@lru_cache
def get_generation_service() -> GenerationService:
    """
    One shared OpenAI adapter per process.
    Tests swap it through app.dependency_overrides.
    """
    return OpenAIGenerationService()


def get_travel_agent(generator: GenerationService = Depends(get_generation_service)) -> TravelAgent:
    return TravelAgent(generator)


def get_request_router(agent: TravelAgent = Depends(get_travel_agent)) -> RequestRouter:
    return RequestRouter(agent)
