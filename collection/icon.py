"""Collection icon, inlined as a data URL"""

ICON = (
    "data:image/svg+xml,"
    "%3Csvg xmlns='http://www.w3.org/2000/svg' viewBox='0 0 64 64'%3E"
    "%3Crect width='64' height='64' rx='12' fill='%230b0f2e'/%3E"
    "%3Ccircle cx='32' cy='32' r='18' fill='none' stroke='%2336d1dc' stroke-width='4'/%3E"
    "%3Ccircle cx='32' cy='32' r='6' fill='%2336d1dc'/%3E"
    "%3C/svg%3E"
)
