"""
Opportunity and event routes.
"""

from aiohttp import web

from adapters.api.utils import services, read_model, json_response, current_user_id, int_param
from core.domain.models import OpportunityCreate, EventCreate

routes = web.RouteTableDef()


# === OPPORTUNITIES ===

@routes.get("/api/opportunities")
async def get_opportunities(request: web.Request) -> web.Response:
    category = request.query.get("category") or None
    opportunities = await services(request).opportunity_service.get_opportunities(category)
    return json_response(opportunities)


@routes.get("/api/opportunities/{opportunity_id}")
async def get_opportunity(request: web.Request) -> web.Response:
    opportunity_id = int_param(request, "opportunity_id", "opportunity")
    opportunity = await services(request).opportunity_service.get_opportunity(opportunity_id)
    return json_response(opportunity)


@routes.post("/api/opportunities")
async def create_opportunity(request: web.Request) -> web.Response:
    current_user_id(request)
    data = await read_model(request, OpportunityCreate)
    opportunity = await services(request).opportunity_service.create_opportunity(data)
    return json_response(opportunity, status=201)


# === EVENTS ===

@routes.get("/api/events")
async def get_events(request: web.Request) -> web.Response:
    event_type = request.query.get("type") or None
    events = await services(request).event_service.get_events(event_type)
    return json_response(events)


@routes.get("/api/events/{event_id}")
async def get_event(request: web.Request) -> web.Response:
    event_id = int_param(request, "event_id", "event")
    event = await services(request).event_service.get_event(event_id)
    return json_response(event)


@routes.post("/api/events")
async def create_event(request: web.Request) -> web.Response:
    current_user_id(request)
    data = await read_model(request, EventCreate)
    event = await services(request).event_service.create_event(data)
    return json_response(event, status=201)
