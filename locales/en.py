"""English strings for every screen."""

EN_STRINGS = {
    # === LANDING ===
    "landing": "⚾ <b>Scoutbase</b>\n\nConnecting athletes, coaches and scouts.",
    "btn_register": "Register",
    "btn_login": "Already have an account? Login",

    # === REGISTER ===
    "register_header": "<b>Create an Account</b>",
    "register_name": "Full Name:",
    "register_email": "Email Address:",
    "register_password": "Password:",
    "fill_all_fields": "Please fill in all fields.",

    # === LOGIN ===
    "login_header": "<b>Login</b>",
    "login_email": "Email:",
    "login_password": "Password:",
    "login_both_required": "Please enter both email and password.",
    "login_success": "Login successful!",
    "login_failed": "Login failed. Please try again. {error}",
    "working": "One moment...",

    # === SESSION ===
    "session_expired": "Your session has expired. Please log in again.",
    "logged_out": "You've been logged out.",
    "logout_failed": "Failed to logout on the server. You've been logged out here anyway.",

    # === ROLE ASSIGNMENT ===
    "role_header": "<b>Assign a Role</b>\n\nPick one:",
    "role_selected": "Selected: <b>{role}</b>",
    "btn_assign_role": "Assign Role",
    "role_assigned": "You're registered as <b>{role}</b>.",
    "role_failed": "Failed to assign role. Please try again.",

    # === PROFILE FORM ===
    "create_header": "<b>Create {role} Profile</b>",
    "edit_header": "<b>Edit Profile</b>",
    "form_prompt": "{label}{required}",
    "form_prompt_hint": "{label}{required}\n<i>{hint}</i>",
    "form_current": "\nCurrent: <code>{value}</code>",
    "form_required_mark": " *",
    "form_picture": "Send a profile picture (photo or image file), or skip.",
    "form_picture_received": "Picture attached: {filename}",
    "form_not_image": "That isn't an image. Send a photo or skip.",
    "form_summary": "<b>Review</b>\n\n{summary}",
    "form_missing": "Please fill in all required fields: {fields}",
    "form_text_expected": "Please answer with text.",
    "scout_create": "<b>Create Scout Profile</b>\n\nScouts don't need any extra details.",
    "btn_create_profile": "Create Profile",
    "btn_skip": "Skip →",
    "btn_keep": "Keep current →",
    "btn_clear": "Clear",
    "btn_submit": "✓ Submit",
    "btn_cancel": "Cancel",
    "profile_created": "{role} profile created successfully!",
    "profile_updated": "Profile updated successfully.",
    "form_cancelled": "Cancelled.",

    # === PROFILE VIEW ===
    "profile_header": "<b>Profile</b>",
    "profile_load_failed": "Failed to load profile data.",
    "profile_picture_line": "Picture: {url}",
    "profile_not_editable": "This profile has nothing to edit.",
    "btn_edit_profile": "✏️ Edit Profile",
    "btn_change_picture": "📸 Change Picture",
    "btn_logout": "Logout",
    "picture_prompt": "Send a new profile picture.",
    "picture_updated": "Profile picture updated.",
    "picture_update_failed": "Failed to update profile picture.",

    # === HOME ===
    "home_header": "<b>Welcome to Scoutbase!</b>",
    "home_greeting": "<b>Welcome to Scoutbase, {name}!</b>",
    "article_selected": "You selected: {title}",
    "btn_profile": "👤 Profile",
    "btn_search_athletes": "🔎 Athletes",
    "btn_search_coaches": "🔎 Coaches",
    "btn_home": "← Home",

    # === SEARCH ===
    "search_header": "<b>Search {kind}</b>\n\nTap a filter to set it, then search.",
    "search_filters": "\n\nFilters:\n{filters}",
    "search_filter_prompt": "{label}:",
    "btn_search": "🔎 Search",
    "btn_clear_filters": "Clear filters",
    "search_running": "Searching...",
    "search_no_results": "No results found.",
    "search_results": "<b>{count} result(s)</b>",
    "btn_contact": "📧 Contact",
    "contact_email": "Email: {email}",
    "contact_failed": "Email not available.",
    "search_disabled": "Search is not available right now.",

    # === RESULT CARDS ===
    "athlete_card": (
        "⚾ <b>{high_school_name}</b>\n"
        "Positions: {positions}\n"
        "Height: {height} ft\n"
        "Weight: {weight} lbs\n"
        "Throws: {throwing_arm} · Bats: {batting_arm}\n"
        "State: {state}\n"
        "Bio: {bio}"
    ),
    "athlete_video": "\nVideo: {youtube_video_link}",
    "coach_card": (
        "🧢 <b>{school_name}</b>\n"
        "Coach: {name}\n"
        "Position: {position_within_org}\n"
        "Team Needs: {team_needs}\n"
        "Division: {division}\n"
        "State: {state}\n"
        "Bio: {bio}"
    ),
    "scout_card": "🔭 <b>Scout</b>\nNo additional details.",

    # === GENERIC ===
    "error": "Error: {error}",
    "not_available": "N/A",
    "too_many_requests": "You're sending too many requests. Please wait a moment.",
    "unknown_command": "Use /start to begin.",
    "admin_only": "Admin only",
    "status": (
        "<b>Scoutbase Bot</b>\n\n"
        "Backend: <code>{backend}</code> ({env})\n"
        "Active sessions: {sessions}\n"
        "Flags:\n<code>{flags}</code>"
    ),
}
