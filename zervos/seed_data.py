"""Demo dataset for ``zervos seed``.

Appointments reference customers by e-mail and services by name; the seed
command resolves service names to ids after the catalog has been synced.
"""

from __future__ import annotations

from typing import Any

CUSTOMERS = [
    {"name": "John Doe", "email": "john.doe@example.com", "phone": "+1-555-0101", "notes": "VIP customer - prefers video calls"},
    {"name": "Jane Smith", "email": "jane.smith@example.com", "phone": "+1-555-0102", "notes": "Prefers morning appointments"},
    {"name": "Bob Wilson", "email": "bob.wilson@example.com", "phone": "+1-555-0103", "notes": "Enterprise account"},
    {"name": "Alice Brown", "email": "alice.brown@example.com", "phone": "+1-555-0104", "notes": "Corporate client - budget approved"},
    {"name": "Charlie Davis", "email": "charlie.davis@example.com", "phone": "+1-555-0105", "notes": "Referred by Jane Smith"},
    {"name": "David Miller", "email": "david.miller@example.com", "phone": "+1-555-0106", "notes": "Tech startup founder"},
]

SERVICES = [
    {"name": "Technical Interview", "description": "In-depth technical assessment for software engineering roles", "duration": "60 mins", "price": "$150", "category": "interview", "is_enabled": True},
    {"name": "HR Screening", "description": "Initial screening call with HR team", "duration": "30 mins", "price": "$75", "category": "interview", "is_enabled": True},
    {"name": "Strategy Consultation", "description": "Business strategy and planning session", "duration": "120 mins", "price": "$300", "category": "consultation", "is_enabled": True},
    {"name": "Product Demo", "description": "Live product demonstration and Q&A session", "duration": "45 mins", "price": "$125", "category": "sales", "is_enabled": True},
    {"name": "Discovery Call", "description": "Initial consultation to understand client needs", "duration": "30 mins", "price": "$50", "category": "sales", "is_enabled": True},
    {"name": "Technical Workshop", "description": "Hands-on technical training session", "duration": "180 mins", "price": "$500", "category": "training", "is_enabled": False},
]

TEAM_MEMBERS = [
    {"name": "Sarah Johnson", "email": "sarah.johnson@zervos.example", "role": "super_admin", "color": "bg-gradient-to-r from-purple-500 to-pink-500", "is_active": True},
    {"name": "Mike Williams", "email": "mike.williams@zervos.example", "role": "admin", "color": "bg-gradient-to-r from-blue-500 to-cyan-500", "is_active": True},
    {"name": "David Lee", "email": "david.lee@zervos.example", "role": "salesperson", "color": "bg-gradient-to-r from-green-500 to-teal-500", "is_active": True},
    {"name": "Tom Anderson", "email": "tom.anderson@zervos.example", "role": "viewer", "color": "bg-gradient-to-r from-gray-500 to-slate-500", "is_active": False},
]

CUSTOM_LABELS = [
    {"label_type": "meeting_platform", "label_value": "Google Meet"},
    {"label_type": "meeting_platform", "label_value": "Zoom"},
    {"label_type": "meeting_platform", "label_value": "Microsoft Teams"},
    {"label_type": "service_category", "label_value": "interview", "description": "Hiring interviews"},
    {"label_type": "service_category", "label_value": "sales"},
]

APPOINTMENTS = [
    {"customer_email": "john.doe@example.com", "service": "Technical Interview", "staff": "Sarah Johnson", "date": "2025-11-01", "time": "10:00 AM", "status": "upcoming", "notes": "Technical interview - React & Node.js", "meeting_platform": "Google Meet", "meeting_link": "https://meet.google.com/abc-defg-hij"},
    {"customer_email": "jane.smith@example.com", "service": "HR Screening", "staff": "Mike Williams", "date": "2025-11-02", "time": "02:00 PM", "status": "upcoming", "notes": "Initial screening call", "meeting_platform": "Zoom", "meeting_link": "https://zoom.us/j/123456789"},
    {"customer_email": "john.doe@example.com", "service": "Strategy Consultation", "staff": "David Lee", "date": "2025-11-06", "time": "01:00 PM", "status": "upcoming", "notes": "Strategy consultation for Q4", "meeting_platform": "Zoom"},
    {"customer_email": "alice.brown@example.com", "service": "Technical Interview", "staff": "Mike Williams", "date": "2025-10-25", "time": "03:00 PM", "status": "completed", "notes": "Completed successfully - hired", "meeting_platform": "Google Meet"},
    {"customer_email": "charlie.davis@example.com", "service": "Product Demo", "staff": "David Lee", "date": "2025-10-26", "time": "11:00 AM", "status": "completed", "notes": "Product demo went well", "meeting_platform": "Zoom"},
    {"customer_email": "david.miller@example.com", "service": "Discovery Call", "staff": "Sarah Johnson", "date": "2025-10-20", "time": "09:00 AM", "status": "cancelled", "notes": "Client rescheduled"},
]


def catalog_payload() -> dict[str, Any]:
    """Everything except appointments, which need service ids first."""
    return {
        "customers": CUSTOMERS,
        "services": SERVICES,
        "team_members": TEAM_MEMBERS,
        "custom_labels": CUSTOM_LABELS,
    }


def appointments_payload(service_ids: dict[str, int]) -> dict[str, Any]:
    appointments = []
    for appt in APPOINTMENTS:
        record = {k: v for k, v in appt.items() if k != "service"}
        record["service_id"] = service_ids.get(appt["service"])
        appointments.append(record)
    return {"appointments": appointments}
