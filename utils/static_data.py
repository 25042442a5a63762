# Fallback static data to allow offline operation / resilience.
# Offsets are fixed hours, no DST.
TIMEZONE_OFFSETS = {
    "Europe/London": 1,
    "Europe/Paris": 2,
    "Europe/Berlin": 2,
    "Africa/Cairo": 3,
    "Europe/Moscow": 4,
    "Asia/Dubai": 5,
    "Asia/Karachi": 6,
    "Asia/Bangkok": 7,
    "Asia/Shanghai": 8,
    "Asia/Tokyo": 9,
    "Australia/Sydney": 10,
    "Pacific/Auckland": 12,
}

# Timezone labels offered when worldtimeapi.org is unreachable
FALLBACK_TIMEZONES = list(TIMEZONE_OFFSETS)

# Country directory used when REST Countries is unreachable (fixed order, not sorted)
FALLBACK_COUNTRIES = [
    {"name": "United Kingdom", "code": "GB", "timezone": "Europe/London", "offset": 1, "capital": "London"},
    {"name": "France", "code": "FR", "timezone": "Europe/Paris", "offset": 2, "capital": "Paris"},
    {"name": "Germany", "code": "DE", "timezone": "Europe/Berlin", "offset": 2, "capital": "Berlin"},
    {"name": "Egypt", "code": "EG", "timezone": "Africa/Cairo", "offset": 3, "capital": "Cairo"},
    {"name": "Russia", "code": "RU", "timezone": "Europe/Moscow", "offset": 4, "capital": "Moscow"},
    {"name": "United Arab Emirates", "code": "AE", "timezone": "Asia/Dubai", "offset": 5, "capital": "Dubai"},
    {"name": "Pakistan", "code": "PK", "timezone": "Asia/Karachi", "offset": 6, "capital": "Karachi"},
    {"name": "Thailand", "code": "TH", "timezone": "Asia/Bangkok", "offset": 7, "capital": "Bangkok"},
    {"name": "China", "code": "CN", "timezone": "Asia/Shanghai", "offset": 8, "capital": "Beijing"},
    {"name": "Japan", "code": "JP", "timezone": "Asia/Tokyo", "offset": 9, "capital": "Tokyo"},
    {"name": "Australia", "code": "AU", "timezone": "Australia/Sydney", "offset": 10, "capital": "Sydney"},
    {"name": "New Zealand", "code": "NZ", "timezone": "Pacific/Auckland", "offset": 12, "capital": "Auckland"},
]
