"""Request payload builders shared by route tests."""

from datetime import datetime, timedelta, timezone


def gradation_payload(title: str = "Spring Graduation Show", **overrides) -> dict:
    payload = {
        "title": title,
        "art": "Untitled No. 3",
        "category": "painting",
        "time": "10:00-18:00",
        "fee": "free",
        "tel": "02-123-4567",
        "address": "1 Gallery Road, Seoul",
        "date": "2025-06-01",
    }
    payload.update(overrides)
    return payload


def university_payload(
    university_name: str = "Hongik University",
    start_in_days: int = 7,
    **overrides,
) -> dict:
    start = datetime.now(timezone.utc) + timedelta(days=start_in_days)
    payload = {
        "universityName": university_name,
        "majorName": "Fine Arts",
        "title": "Graduation Works",
        "explanation": "Final-year projects",
        "location": "Seoul",
        "startDate": start.isoformat(),
        "endDate": (start + timedelta(days=14)).isoformat(),
        "userId": 1,
    }
    payload.update(overrides)
    return payload
