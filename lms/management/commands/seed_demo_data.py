"""
Seed the database with the DevMastery demo data.

Creates the three demo accounts (password "password"), the web development
roadmap with the student's completed tasks, announcements, a batch with the
student's approved enrollment, board tasks, calendar events and a
conversation between tutor and student.

Usage:
    python manage.py seed_demo_data
    python manage.py seed_demo_data --flush   # delete existing LMS data first
"""

import logging
from datetime import date, datetime, time, timedelta

from django.contrib.auth.models import User
from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from ...access.roles import Role
from ...models import (
    Announcement,
    Batch,
    BatchEnrollment,
    Conversation,
    Event,
    Message,
    Module,
    ModuleTask,
    Task,
    TaskCompletion,
)

logger = logging.getLogger(__name__)

DEMO_PASSWORD = "password"

DEMO_USERS = {
    Role.ADMIN: ("Admin User", "admin@devmastery.com", "2563EB"),
    Role.TUTOR: ("Tutor User", "tutor@devmastery.com", "0D9488"),
    Role.STUDENT: ("Student User", "student@devmastery.com", "F59E0B"),
}

# (short title, description, [(task title, completed by the demo student)])
DEMO_MODULES = [
    (
        "Month 1: Web Fundamentals",
        "HTML, CSS, JavaScript basics and core web concepts",
        [
            ("HTML Structure & Semantics", True),
            ("CSS Layouts & Responsive Design", True),
            ("JavaScript Fundamentals", True),
            ("DOM Manipulation", True),
        ],
    ),
    (
        "Month 2: React Fundamentals",
        "React component architecture, props, state, and hooks",
        [
            ("React Components & JSX", True),
            ("Props & State Management", True),
            ("React Hooks", True),
            ("Context API & Advanced Patterns", False),
        ],
    ),
    (
        "Month 3: Backend with Node.js",
        "Building REST APIs with Express and Node.js",
        [
            ("Node.js Basics", True),
            ("Express Framework", True),
            ("RESTful API Design", False),
            ("Authentication & Authorization", False),
        ],
    ),
    (
        "Month 4: MongoDB & Mongoose",
        "Database design, operations, and modeling with MongoDB",
        [
            ("MongoDB Introduction", True),
            ("Mongoose Schema Design", False),
            ("CRUD Operations", False),
            ("Advanced Queries & Aggregation", False),
        ],
    ),
    (
        "Month 5: Full-Stack Integration",
        "Connecting frontend and backend, deployment strategies",
        [
            ("API Integration with React", False),
            ("State Management with Context/Redux", False),
            ("Authentication Flow", False),
            ("Deployment Preparation", False),
        ],
    ),
    (
        "Month 6: Advanced Topics & Project",
        "Real-time features, testing, and final project",
        [
            ("WebSockets & Real-time Features", False),
            ("Testing & Quality Assurance", False),
            ("Performance Optimization", False),
            ("Capstone Project Completion", False),
        ],
    ),
]

DEMO_ANNOUNCEMENTS = [
    ("Welcome to the MERN Stack Course!", "We're excited to have you join us on this learning journey.", Role.ADMIN),
    ("React Module Starting Soon", "Get ready for our deep dive into React fundamentals next week.", Role.TUTOR),
    ("Monthly Coding Challenge", "Join our monthly coding challenge to test your skills and win prizes!", Role.ADMIN),
]

# (title, description, status, priority, days from today)
DEMO_BOARD_TASKS = [
    ("Review student submissions", "Grade the React project submissions for Batch 3", Task.Status.TODO, Task.Priority.HIGH, 2),
    ("Prepare workshop materials", "Create slides and examples for the React hooks workshop", Task.Status.IN_PROGRESS, Task.Priority.MEDIUM, 7),
    ("Update curriculum", "Add TypeScript modules to the frontend curriculum", Task.Status.COMPLETED, Task.Priority.LOW, -3),
]

# (title, type, days from today, hour)
DEMO_EVENTS = [
    ("Frontend Basics", Event.EventType.LECTURE, 0, 10),
    ("React Fundamentals", Event.EventType.ASSIGNMENT, 3, 23),
    ("TypeScript Workshop", Event.EventType.WORKSHOP, 7, 14),
]

DEMO_CONVERSATION = [
    (Role.TUTOR, "Hi there, how can I help you with your learning journey?"),
    (Role.STUDENT, "I'm having trouble with React hooks. Can you explain useEffect?"),
    (
        Role.TUTOR,
        "Of course! The useEffect hook lets you perform side effects in function components.",
    ),
]


class Command(BaseCommand):
    help = "Load the DevMastery demo accounts and sample data"

    def add_arguments(self, parser):
        parser.add_argument(
            "--flush",
            action="store_true",
            help="Delete existing modules, batches, tasks, events, messages and announcements first",
        )

    def _create_user(self, role: str) -> User:
        name, email, color = DEMO_USERS[role]
        first_name, last_name = name.split(" ", 1)
        user, created = User.objects.get_or_create(
            username=email.split("@")[0],
            defaults={"email": email, "first_name": first_name, "last_name": last_name},
        )
        user.set_password(DEMO_PASSWORD)
        user.save()

        profile = user.profile
        profile.role = role
        profile.display_name = name
        profile.avatar_url = (
            f"https://ui-avatars.com/api/?name={name.replace(' ', '+')}&background={color}&color=fff"
        )
        profile.save()

        verb = "created" if created else "updated"
        self.stdout.write(self.style.SUCCESS(f'Demo user "{email}" ({role}) {verb}.'))
        return user

    def _flush(self) -> None:
        self.stdout.write(self.style.WARNING("Deleting existing LMS data..."))
        TaskCompletion.objects.all().delete()
        Module.objects.all().delete()
        BatchEnrollment.objects.all().delete()
        Batch.objects.all().delete()
        Task.objects.all().delete()
        Conversation.objects.all().delete()
        Event.objects.all().delete()
        Announcement.objects.all().delete()
        self.stdout.write("  - LMS data deleted.")

    def _create_roadmap(self, student: User, today: date) -> None:
        course_type = "Web Development"
        # Due dates are spread weekly around today so the dashboard has upcoming work
        due = today - timedelta(days=7 * 9)
        for order, (title, description, tasks) in enumerate(DEMO_MODULES, start=1):
            module, _ = Module.objects.get_or_create(
                title=f"{course_type}: {title}",
                defaults={
                    "description": description,
                    "course_type": course_type,
                    "duration_weeks": 4,
                    "order": order,
                },
            )
            for task_order, (task_title, completed) in enumerate(tasks, start=1):
                due += timedelta(days=7)
                task, _ = ModuleTask.objects.get_or_create(
                    module=module,
                    title=task_title,
                    defaults={"due_date": due, "order": task_order},
                )
                if completed:
                    TaskCompletion.objects.get_or_create(user=student, task=task)
        self.stdout.write(f"  - {len(DEMO_MODULES)} roadmap modules ready.")

    @transaction.atomic
    def handle(self, *args, **options):
        if options["flush"]:
            self._flush()

        self.stdout.write(self.style.SUCCESS("Starting demo data seeding..."))
        users = {role: self._create_user(role) for role in DEMO_USERS}
        admin, tutor, student = users[Role.ADMIN], users[Role.TUTOR], users[Role.STUDENT]
        today = timezone.localdate()

        self._create_roadmap(student, today)

        for offset, (title, content, role) in enumerate(DEMO_ANNOUNCEMENTS):
            Announcement.objects.get_or_create(
                title=title,
                defaults={
                    "content": content,
                    "author": users[role],
                    "date": today - timedelta(days=len(DEMO_ANNOUNCEMENTS) - offset),
                },
            )
        self.stdout.write(f"  - {len(DEMO_ANNOUNCEMENTS)} announcements ready.")

        batch, _ = Batch.objects.get_or_create(
            name="Batch 3 - Frontend",
            defaults={
                "description": "MERN stack cohort",
                "start_date": today - timedelta(days=60),
                "end_date": today + timedelta(days=120),
                "created_by": admin,
            },
        )
        BatchEnrollment.objects.get_or_create(
            batch=batch,
            student=student,
            defaults={
                "status": BatchEnrollment.Status.APPROVED,
                "approved_by": admin,
                "approved_at": timezone.now(),
            },
        )
        self.stdout.write("  - Demo batch and enrollment ready.")

        for title, description, status, priority, days in DEMO_BOARD_TASKS:
            Task.objects.get_or_create(
                title=title,
                owner=tutor,
                defaults={
                    "description": description,
                    "status": status,
                    "priority": priority,
                    "due_date": today + timedelta(days=days),
                },
            )

        for title, event_type, days, hour in DEMO_EVENTS:
            starts_at = timezone.make_aware(datetime.combine(today + timedelta(days=days), time(hour)))
            Event.objects.get_or_create(
                title=title,
                defaults={"event_type": event_type, "starts_at": starts_at, "created_by": tutor},
            )

        conversation = Conversation.objects.between(tutor, student).first()
        if conversation is None:
            conversation = Conversation.objects.create(participant_one=tutor, participant_two=student)
            for role, text in DEMO_CONVERSATION:
                Message.objects.create(conversation=conversation, sender=users[role], text=text)
            conversation.last_activity_at = timezone.now()
            conversation.save(update_fields=["last_activity_at"])

        logger.info("Demo data seeded")
        self.stdout.write(self.style.SUCCESS("Demo data seeding finished."))
