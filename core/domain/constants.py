"""
Domain constants - endpoints, role routing tables and static content.
Centralized here for easy modification.
"""

from core.domain.models import Role, Route, Article

# === Backend endpoints (relative to settings.scoutbase_api_url) ===
REGISTER_PATH = "/register"
LOGIN_PATH = "/login"
CURRENT_USER_PATH = "/user"
LOGOUT_PATH = "/logout"
FETCH_ROLE_PATH = "/fetchrole"
ASSIGN_ROLE_PATH = "/assignrole"
FETCH_EMAIL_PATH = "/fetch-email/{user_id}/"

# Profile lookup doubles as search: GET with filters, or with user_id only
PROFILE_LOOKUP_PATHS = {
    Role.ATHLETE: "/searchforathlete",
    Role.COACH: "/searchforcoach",
    Role.SCOUT: "/searchforscout",
}
CREATE_PROFILE_PATHS = {
    Role.ATHLETE: "/athlete/createprofile",
    Role.COACH: "/coach/createprofile",
    Role.SCOUT: "/scout/createprofile",
}
EDIT_PROFILE_PATHS = {
    Role.ATHLETE: "/editathlete/{user_id}/",
    Role.COACH: "/editcoach/{user_id}/",
}
EDIT_PICTURE_PATHS = {
    Role.ATHLETE: "/edit-athlete-profile-picture/{user_id}/",
    Role.COACH: "/edit-coach-profile-picture/{user_id}/",
}

# Backend cookie that carries the session token (set on login, read by /user)
TOKEN_COOKIE = "jwt"

# === Routing tables ===
CREATE_PROFILE_ROUTES = {
    Role.ATHLETE: Route.CREATE_ATHLETE,
    Role.COACH: Route.CREATE_COACH,
    Role.SCOUT: Route.CREATE_SCOUT,
}
EDIT_PROFILE_ROUTES = {
    Role.ATHLETE: Route.EDIT_ATHLETE,
    Role.COACH: Route.EDIT_COACH,
}
SEARCHABLE_ROLES = (Role.ATHLETE, Role.COACH)

# Multipart field name for uploaded pictures
PROFILE_PICTURE_FIELD = "profile_picture"

# === Home screen ===
FEATURED_ARTICLES = [
    Article(
        id=1,
        title="5 Tips to Make Your Profile Stand Out",
        description="Learn how to create a compelling profile to catch the attention of recruiters.",
    ),
    Article(
        id=2,
        title="Upcoming College Recruiting Event",
        description="Don't miss the recruiting event hosted by State University this weekend!",
    ),
    Article(
        id=3,
        title="How to Showcase Your Skills Effectively",
        description="Highlight your strengths with these proven techniques.",
    ),
]

# === Rate Limiting (requests per interval) ===
RATE_LIMIT_COMMANDS = 20         # messages/callbacks per minute
RATE_LIMIT_SEARCH = 10           # search submissions per minute
RATE_LIMIT_INTERVAL_SECONDS = 60


def get_article(article_id: int):
    """Find a featured article by id, None if unknown"""
    for article in FEATURED_ARTICLES:
        if article.id == article_id:
            return article
    return None
