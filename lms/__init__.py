"""
DevMastery LMS Package

Backend of the DevMastery learning dashboard: role-gated navigation, the
learning roadmap with per-user progress, batch enrollment, the task board,
messaging, calendar, announcements, student overview and statistics.

Structure:
- access/:     Roles, route table, authorization decision and API guard
- users/:      Authentication, profile and user directory
- roadmap/:    Modules, module tasks and progress derivation
- batches/:    Batch enrollment workflow
- tasks/:      Task board
- messaging/:  Conversations and messages
- events/:     Calendar
- dashboard/:  Home page summary and announcements
- students/:   Student overview
- statistics/: Admin statistics
- management/: Django management commands

Author: DevMastery Development Team
Version: 1.0.0
"""
