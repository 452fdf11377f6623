# app/data/seed.py
# Authored content copied into the document the first time it is created.

daily_targets = {
    "deep_work_hours": 3,
    "phone_screen_time": 1,
    "exercise_sessions_per_week": 5,
    "sleep_hours": 8,
    "meditation_minutes": 10,
}

motivational_quotes = [
    "Discipline is choosing between what you want now and what you want most.",
    "Deep work is the superpower of the 21st century.",
    "You do not rise to the level of your goals. You fall to the level of your systems.",
    "The successful warrior is the average man, with laser-like focus.",
    "What you do every day matters more than what you do once in a while.",
    "Focus on being productive instead of busy.",
    "Small daily improvements are the key to staggering long-term results.",
]

# Order matters: the first three are evaluated by the achievement rules.
achievement_badges = [
    {"name": "Early Riser", "description": "Deep work logged every day for 7 days", "earned": False},
    {"name": "Deep Work Master", "description": "3+ hours of deep work every day for 7 days", "earned": False},
    {"name": "Phone Detox", "description": "Screen time at or under 1 hour for 14 logged days", "earned": False},
    {"name": "Iron Body", "description": "Exercise 5 times a week for a month", "earned": False},
    {"name": "Zen Mind", "description": "Meditate every day for 30 days", "earned": False},
    {"name": "Monk Mode Graduate", "description": "Complete all three months", "earned": False},
]

monthly_milestones = [
    {
        "month": 1,
        "title": "Foundation",
        "status": "in_progress",
        "completion_rate": 0,
        "color": "#1FB8CD",
        "key_goals": [
            {"goal": "Wake up at 5:30 every day", "progress": 0, "completed": False},
            {"goal": "3 hours of deep work daily", "progress": 0, "completed": False},
            {"goal": "Screen time under 1 hour", "progress": 0, "completed": False},
        ],
    },
    {
        "month": 2,
        "title": "Intensify",
        "status": "not_started",
        "completion_rate": 0,
        "color": "#FFC185",
        "key_goals": [
            {"goal": "Ship one side project", "progress": 0, "completed": False},
            {"goal": "Exercise 5 times a week", "progress": 0, "completed": False},
            {"goal": "Read two technical books", "progress": 0, "completed": False},
        ],
    },
    {
        "month": 3,
        "title": "Mastery",
        "status": "not_started",
        "completion_rate": 0,
        "color": "#B4413C",
        "key_goals": [
            {"goal": "4 hours of deep work daily", "progress": 0, "completed": False},
            {"goal": "Publish a technical article", "progress": 0, "completed": False},
            {"goal": "30-day meditation streak", "progress": 0, "completed": False},
        ],
    },
]

monk_mode_curriculum = {
    "duration_months": 3,
    "months": [
        {
            "month": 1,
            "focus": "Fundamentals and habits",
            "weeks": [
                {"week": 1, "topic": "HTML & CSS refresher", "deliverable": "Static portfolio page"},
                {"week": 2, "topic": "Modern JavaScript", "deliverable": "Todo app"},
                {"week": 3, "topic": "HTTP and REST", "deliverable": "Public API client"},
                {"week": 4, "topic": "Git workflows", "deliverable": "Open source contribution"},
            ],
        },
        {
            "month": 2,
            "focus": "Backend and data",
            "weeks": [
                {"week": 5, "topic": "Server frameworks", "deliverable": "CRUD API"},
                {"week": 6, "topic": "SQL databases", "deliverable": "Schema and migrations"},
                {"week": 7, "topic": "Testing", "deliverable": "Test suite for the API"},
                {"week": 8, "topic": "Deployment", "deliverable": "Hosted API"},
            ],
        },
        {
            "month": 3,
            "focus": "Full stack project",
            "weeks": [
                {"week": 9, "topic": "Project design", "deliverable": "Design document"},
                {"week": 10, "topic": "Build", "deliverable": "MVP"},
                {"week": 11, "topic": "Polish", "deliverable": "Beta release"},
                {"week": 12, "topic": "Launch", "deliverable": "Public launch and write-up"},
            ],
        },
    ],
}

daily_schedule = {
    "wake_up": "05:30",
    "blocks": [
        {"time": "05:30-06:00", "activity": "Meditation and journaling"},
        {"time": "06:00-07:00", "activity": "Exercise"},
        {"time": "07:30-10:30", "activity": "Deep work block 1"},
        {"time": "10:30-11:00", "activity": "Break, no phone"},
        {"time": "11:00-13:00", "activity": "Deep work block 2"},
        {"time": "13:00-14:00", "activity": "Lunch and walk"},
        {"time": "14:00-17:00", "activity": "Shallow work and learning"},
        {"time": "21:00-21:30", "activity": "Review the day and plan tomorrow"},
    ],
    "sleep": "22:00",
}

health_checklist = {
    "daily": [
        "Drink 2 liters of water",
        "30 minutes of movement",
        "No sugar after 18:00",
        "Screens off 1 hour before bed",
    ],
    "weekly": [
        "Meal prep on Sunday",
        "One long walk or hike",
        "Weekly review",
    ],
}

anti_distraction_system = {
    "rules": [
        "Phone stays in another room during deep work",
        "Social media apps removed from phone",
        "Notifications disabled except calls",
        "Email checked twice a day only",
    ],
    "tools": ["Website blocker", "Grayscale phone display", "Pomodoro timer"],
    "triggers": {
        "boredom": "Take a 5 minute walk instead of reaching for the phone",
        "stuck": "Write down the problem in one sentence before searching",
    },
}

monk_mode_flashcards = [
    {"front": "What is deep work?", "back": "Focused, distraction-free work that pushes your cognitive limits"},
    {"front": "Pomodoro length", "back": "25 minutes of focus followed by a 5 minute break"},
    {"front": "Why track screen time?", "back": "What gets measured gets managed"},
    {"front": "Minimum effective sleep", "back": "7-9 hours for most adults"},
]

static_sections = {
    "monk_mode_curriculum": monk_mode_curriculum,
    "daily_schedule": daily_schedule,
    "health_checklist": health_checklist,
    "anti_distraction_system": anti_distraction_system,
    "monk_mode_flashcards": monk_mode_flashcards,
}
