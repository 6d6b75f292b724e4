"""
Demo data for local runs: a handful of football profiles with posts, comments,
likes, connections, opportunities, events and messages.

Everything goes through the services, so the same rules apply as for API calls.
"""

import logging
import random
from datetime import datetime, timedelta, timezone
from typing import List, Optional

from adapters.api.loader import Container
from core.domain.errors import ConflictError
from core.domain.models import (
    User, PostCreate, PostType, OpportunityCreate, EventCreate, ConnectionStatus,
)

logger = logging.getLogger(__name__)

DEMO_PASSWORD = "football123"

DEMO_USERS = [
    {"username": "davidbeckham", "full_name": "David Beckham", "position": "Midfielder",
     "club": "Inter Miami CF (Owner)", "location": "Miami, USA"},
    {"username": "cristiano", "full_name": "Cristiano Ronaldo", "position": "Forward",
     "club": "Al Nassr FC", "location": "Riyadh, Saudi Arabia"},
    {"username": "leomessi", "full_name": "Lionel Messi", "position": "Forward",
     "club": "Inter Miami CF", "location": "Miami, USA"},
    {"username": "pepguardiola", "full_name": "Pep Guardiola", "position": "Manager",
     "club": "Manchester City", "location": "Manchester, UK"},
    {"username": "erlinghaaland", "full_name": "Erling Haaland", "position": "Forward",
     "club": "Manchester City", "location": "Manchester, UK"},
    {"username": "kylianmbappe", "full_name": "Kylian Mbappé", "position": "Forward",
     "club": "Real Madrid", "location": "Madrid, Spain"},
]

POST_CONTENTS = [
    "Great training session today! Working on improving my ball control.",
    "Just signed with my new club! Excited for this new chapter in my career.",
    "Match day tomorrow. Feeling ready and focused!",
    "Analyzing my performance from last weekend. Always room for improvement.",
    "Working on my finishing technique. Practice makes perfect.",
]

MEDIA_URLS = [
    "https://source.unsplash.com/random/800x600/?football,goal",
    "https://source.unsplash.com/random/800x600/?soccer,match",
    "https://source.unsplash.com/random/800x600/?football,training",
]

ACHIEVEMENTS = [
    ("Player of the Month", "League One - March"),
    ("Goal of the Season", "Premier League"),
    ("100 Appearances", "Club Milestone"),
    ("Clean Sheet Record", "10 consecutive matches"),
]

STATS = [
    {"goals": 12, "assists": 8, "matches": 20, "pass_accuracy": 87},
    {"goals": 5, "assists": 15, "matches": 18, "pass_accuracy": 92},
    {"clean_sheets": 14, "saves": 82, "matches": 22},
]

COMMENTS = [
    "Great work!",
    "Keep it up!",
    "Impressive skills!",
    "Well done!",
    "Can you share some tips?",
    "Your hard work is paying off!",
]

OPPORTUNITIES = [
    OpportunityCreate(
        title="First Team Goalkeeper", club="Manchester United FC", location="Manchester, UK",
        category="football", position="Goalkeeper", type="Job",
        description="Looking for an experienced goalkeeper to join our first team squad.",
        salary="£50,000-£80,000/week",
    ),
    OpportunityCreate(
        title="Youth Academy Trials", club="FC Barcelona", location="Barcelona, Spain",
        category="football", position="All Positions", type="Trial",
        description="Open trials for talented young players aged 15-18.",
    ),
    OpportunityCreate(
        title="Technical Coach", club="Ajax Amsterdam", location="Amsterdam, Netherlands",
        category="training", type="Job", salary="€70,000/year",
        description="Technical skills coach for our youth development program.",
    ),
    OpportunityCreate(
        title="Pre-Season Training Camp", club="Elite Football Academy", location="Lisbon, Portugal",
        category="training", position="All Positions", type="Training",
        description="Two-week intensive camp led by former professionals and UEFA-licensed coaches.",
    ),
]

# (title, description, days from now, location, type)
EVENTS = [
    ("Football Career Expo", "Connect with clubs, scouts and agencies from across Europe.",
     15, "London, UK", "networking"),
    ("Scouting Showcase", "Showcase your skills in front of scouts from top European clubs.",
     7, "Madrid, Spain", "trial"),
    ("Youth Development Workshop", "The latest training methods for young players.",
     21, "Amsterdam, Netherlands", "training"),
    ("Technical Skills Masterclass", "A day focused on technical skills and tactical awareness.",
     10, "Lyon, France", "training"),
]


async def _ensure_users(container: Container) -> List[User]:
    users = []
    for profile in DEMO_USERS:
        try:
            user = await container.auth_service.register(password=DEMO_PASSWORD, **profile)
        except ConflictError:
            user = await container.user_service.get_user_by_username(profile["username"])
        users.append(user)
    return users


def _random_post(rng: random.Random) -> PostCreate:
    post_type = rng.choice([PostType.TEXT, PostType.VIDEO, PostType.ACHIEVEMENT, PostType.STATS])
    data = PostCreate(content=rng.choice(POST_CONTENTS), type=post_type)
    if post_type == PostType.VIDEO:
        data.media_url = rng.choice(MEDIA_URLS)
    elif post_type == PostType.ACHIEVEMENT:
        data.achievement_title, data.achievement_subtitle = rng.choice(ACHIEVEMENTS)
    elif post_type == PostType.STATS:
        data.stats_data = dict(rng.choice(STATS))
    return data


async def seed_demo_data(container: Container, rng: Optional[random.Random] = None) -> dict:
    """
    Populate storage with demo data. Users are reused when they already exist;
    everything else is added on top. Returns counts per kind.
    """
    rng = rng or random.Random()
    counts = {"users": 0, "posts": 0, "comments": 0, "likes": 0, "connections": 0,
              "opportunities": 0, "events": 0, "messages": 0}

    users = await _ensure_users(container)
    counts["users"] = len(users)

    # Posts with comments and likes from other users
    for author in users:
        for _ in range(rng.randint(2, 3)):
            post = await container.post_service.create_post(author.id, _random_post(rng))
            counts["posts"] += 1
            others = [u for u in users if u.id != author.id]
            for commenter in rng.sample(others, rng.randint(0, 2)):
                await container.comment_service.add_comment(post.id, commenter.id, rng.choice(COMMENTS))
                counts["comments"] += 1
            for liker in rng.sample(others, rng.randint(0, len(others))):
                await container.post_service.toggle_like(post.id, liker.id)
                counts["likes"] += 1

    # One row per pair with a mix of statuses
    for i, first in enumerate(users):
        for second in users[i + 1:]:
            requester, receiver = (first, second) if rng.random() > 0.5 else (second, first)
            existing = await container.connection_service.get_connection_status(requester.id, receiver.id)
            if existing:
                continue
            connection = await container.connection_service.request_connection(requester.id, receiver.id)
            status = rng.choice(list(ConnectionStatus))
            if status == ConnectionStatus.ACCEPTED:
                await container.connection_service.accept(connection.id, receiver.id)
            elif status == ConnectionStatus.DECLINED:
                await container.connection_service.decline(connection.id, receiver.id)
            counts["connections"] += 1

    for opportunity in OPPORTUNITIES:
        await container.opportunity_service.create_opportunity(opportunity)
        counts["opportunities"] += 1

    now = datetime.now(timezone.utc)
    for title, description, days, location, event_type in EVENTS:
        await container.event_service.create_event(EventCreate(
            title=title,
            description=description,
            date=now + timedelta(days=days),
            location=location,
            type=event_type,
        ))
        counts["events"] += 1

    if len(users) >= 2:
        first, second = users[0], users[1]
        await container.message_service.send_message(first.id, second.id, "Great match last weekend!")
        await container.message_service.send_message(second.id, first.id, "Thanks! See you at the showcase?")
        counts["messages"] += 2

    logger.info(f"[SEED] Demo data created: {counts}")
    return counts
