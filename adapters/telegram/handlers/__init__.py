from adapters.telegram.handlers import start, auth, role_assignment, profile_form, profile, search

# IMPORTANT: State-specific routers must be BEFORE start router
# because start.py has the catch-all fallback handler
routers = [
    auth.router,             # Register/login - FSM text input
    role_assignment.router,  # RoleStates
    profile_form.router,     # ProfileFormStates - create/edit walk
    profile.router,          # Profile view, picture, logout
    search.router,           # SearchStates + contact reveal
    start.router,            # Last: has catch-all handlers
]

__all__ = ["routers"]
