from adapters.api.routes import auth, users, posts, connections, listings, messages, health

# Static paths (/users/me, /posts/user/..) are registered before their
# /{id} siblings inside each module
routes = [
    health.routes,
    auth.routes,
    users.routes,
    posts.routes,
    connections.routes,
    listings.routes,
    messages.routes,
]
