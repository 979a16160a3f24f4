"""Seed the intranet with sample departments, news, events and chat rooms.

Safe to run repeatedly: rows are matched by name or title and only
missing ones are created.
"""

from __future__ import annotations

from datetime import timedelta

from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from apps.chat.models import ChatMessage, ChatRoom, ChatRoomMember
from apps.departments.models import Department
from apps.events.models import Event
from apps.news.models import News
from apps.users.levels import UserLevel
from apps.users.models import CustomUser

DEPARTMENTS = [
    ("Engineering", "Building and maintaining our technology infrastructure", "code", "bg-blue-500"),
    ("Marketing", "Driving brand awareness and customer acquisition", "megaphone", "bg-purple-500"),
    ("Sales", "Growing revenue through customer relationships", "trending-up", "bg-green-500"),
    ("Human Resources", "Supporting our people and company culture", "users", "bg-orange-500"),
    ("Finance", "Managing financial operations and planning", "dollar-sign", "bg-indigo-500"),
    ("Operations", "Ensuring smooth daily business operations", "settings", "bg-teal-500"),
]

NEWS = [
    {
        "title": "Company Quarterly Results Exceed Expectations",
        "content": (
            "Our Q4 results show remarkable growth with 35% increase in revenue and successful "
            "expansion into new markets. This achievement reflects our team's dedication and "
            "strategic planning."
        ),
        "summary": "Q4 results show 35% revenue growth and successful market expansion.",
        "image_url": "https://images.unsplash.com/photo-1507003211169-0a1dd7228f2d?w=400",
        "category": "company",
    },
    {
        "title": "New Employee Wellness Program Launch",
        "content": (
            "Introducing comprehensive wellness benefits including gym memberships, mental health "
            "support, and flexible work arrangements to support work-life balance."
        ),
        "summary": "New wellness program includes gym memberships and mental health support.",
        "image_url": "https://images.unsplash.com/photo-1571019613454-1cb2f99b2d8b?w=400",
        "category": "hr",
    },
    {
        "title": "Tech Innovation Day - March 15th",
        "content": (
            "Join us for presentations on AI integration, cloud infrastructure improvements, and "
            "upcoming product launches. All departments welcome."
        ),
        "summary": "Tech presentations on AI integration and product launches on March 15th.",
        "image_url": "https://images.unsplash.com/photo-1560472354-b33ff0c44a43?w=400",
        "category": "tech",
    },
]

# (title, description, days from now, duration, location, max attendees)
EVENTS = [
    (
        "All-Hands Company Meeting",
        "Monthly company update covering quarterly results, upcoming projects, and team "
        "recognitions. Refreshments provided.",
        7,
        timedelta(hours=2),
        "Main Conference Room / Virtual",
        200,
    ),
    (
        "Team Building Workshop",
        "Interactive team building activities designed to strengthen collaboration and "
        "communication across departments.",
        14,
        timedelta(hours=4),
        "Recreation Center",
        50,
    ),
    (
        "Lunch & Learn: Innovation Trends",
        "Guest speaker presentation on emerging technology trends and their impact on our "
        "industry. Lunch included.",
        21,
        timedelta(minutes=90),
        "Auditorium",
        100,
    ),
]

# (name, description, welcome message)
CHAT_ROOMS = [
    (
        "General Discussion",
        "Open chat for general company discussions and announcements",
        "Welcome everyone! Feel free to share updates and ask questions here.",
    ),
    (
        "Engineering Team",
        "Technical discussions and project coordination",
        "Great work on the latest deployment! The new features are performing well.",
    ),
    (
        "Marketing & Sales",
        "Marketing campaigns and sales strategy discussions",
        "Q1 marketing campaign results are in - exceeded targets by 25%!",
    ),
]


class Command(BaseCommand):
    help = "Creates sample departments, news, events and chat rooms"

    def add_arguments(self, parser):  # type: ignore
        parser.add_argument(
            "--admin-email",
            help="Author of the sample content; created as an administrator when missing.",
        )
        parser.add_argument(
            "--admin-password",
            help="Password for a newly created administrator (unusable password if omitted).",
        )

    @transaction.atomic
    def handle(self, *args, **options):  # type: ignore
        author = self._author(options.get("admin_email"), options.get("admin_password"))
        now = timezone.now()
        created = {"departments": 0, "news": 0, "events": 0, "chat rooms": 0}

        for name, description, icon, color in DEPARTMENTS:
            _, is_new = Department.objects.get_or_create(
                name=name,
                defaults={"description": description, "icon": icon, "color": color},
            )
            created["departments"] += is_new

        for article in NEWS:
            _, is_new = News.objects.get_or_create(
                title=article["title"],
                defaults={**article, "author": author},
            )
            created["news"] += is_new

        for title, description, days, duration, location, max_attendees in EVENTS:
            start = now + timedelta(days=days)
            _, is_new = Event.objects.get_or_create(
                title=title,
                defaults={
                    "description": description,
                    "start_time": start,
                    "end_time": start + duration,
                    "location": location,
                    "max_attendees": max_attendees,
                    "organizer": author,
                },
            )
            created["events"] += is_new

        for name, description, welcome in CHAT_ROOMS:
            room, is_new = ChatRoom.objects.get_or_create(
                name=name,
                defaults={"description": description, "created_by": author},
            )
            if not is_new:
                continue
            created["chat rooms"] += 1
            if author is not None:
                ChatRoomMember.objects.create(room=room, user=author, role=ChatRoomMember.Role.ADMIN)
            ChatMessage.objects.create(room=room, sender=author, message=welcome)

        for label, count in created.items():
            self.stdout.write(f"Created {count} {label}")
        self.stdout.write(self.style.SUCCESS("Sample data ready"))

    def _author(self, email: str | None, password: str | None) -> CustomUser | None:
        if not email:
            return CustomUser.objects.filter(user_level=UserLevel.ADMIN, is_active=True).first()

        user = CustomUser.objects.filter(email__iexact=email).first()
        if user is None:
            user = CustomUser.objects.create_superuser(
                email=email,
                password=password,
                first_name="Intranet",
                last_name="Admin",
                department="Operations",
            )
            self.stdout.write(f"Created administrator {user.email}")
        elif not user.is_intranet_admin():
            self.stdout.write(
                self.style.WARNING(f"{user.email} cannot manage content; content is attributed anyway")
            )
        return user
