"""Name-based category guesses for icons and pictograms.

Used by the scanner when a package ships no metadata.json. Rules are
evaluated in order and the first rule with a matching substring wins.
"""

ICON_CATEGORY_RULES: tuple[tuple[tuple[str, ...], str], ...] = (
    (("add", "plus"), "Actions"),
    (("delete", "remove", "trash"), "Actions"),
    (("edit", "pencil"), "Actions"),
    (("save", "check"), "Actions"),
    (("download", "upload"), "Actions"),
    (("search", "magnify"), "Actions"),
    (("filter", "sort"), "Actions"),
    (("user", "person", "profile"), "User"),
    (("settings", "preferences", "gear"), "Settings"),
    (("notification", "alert", "warning"), "Alerts"),
    (("home", "house"), "Navigation"),
    (("arrow", "chevron", "caret"), "Navigation"),
    (("menu", "hamburger"), "Navigation"),
    (("file", "document", "folder"), "Files"),
    (("image", "photo", "picture"), "Media"),
    (("video", "play", "pause"), "Media"),
    (("audio", "sound", "volume"), "Media"),
    (("email", "mail", "message"), "Communication"),
    (("phone", "call"), "Communication"),
    (("chat", "comment"), "Communication"),
    (("calendar", "date", "time"), "Time"),
    (("clock", "timer"), "Time"),
    (("chart", "graph", "analytics"), "Charts"),
    (("table", "grid"), "Data"),
    (("list", "item"), "Data"),
)
ICON_DEFAULT_CATEGORY = "Other"

PICTOGRAM_CATEGORY_RULES: tuple[tuple[tuple[str, ...], str], ...] = (
    (("ai", "machine", "robot"), "AI & Technology"),
    (("cloud", "server", "data"), "Cloud & Data"),
    (("security", "shield", "lock"), "Security"),
    (("business", "office", "team"), "Business"),
    (("health", "medical", "care"), "Healthcare"),
    (("finance", "money", "bank"), "Finance"),
    (("education", "school", "learn"), "Education"),
    (("travel", "transport", "journey"), "Travel"),
    (("environment", "green", "sustainability"), "Environment"),
)
PICTOGRAM_DEFAULT_CATEGORY = "General"


def categorize(name: str, rules, default: str) -> str:
    """Return the category of the first rule with a pattern found in name."""
    name_lower = name.lower()
    for patterns, category in rules:
        if any(p in name_lower for p in patterns):
            return category
    return default


def categorize_icon(name: str) -> str:
    return categorize(name, ICON_CATEGORY_RULES, ICON_DEFAULT_CATEGORY)


def categorize_pictogram(name: str) -> str:
    return categorize(name, PICTOGRAM_CATEGORY_RULES, PICTOGRAM_DEFAULT_CATEGORY)
