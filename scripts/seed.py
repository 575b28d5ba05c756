"""Script to reset the task table and load demo missions."""
import asyncio
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from sqlalchemy import delete

from mission_control.database import AsyncSessionLocal, init_db
from mission_control.models.task import Comment, Task, TaskPriority, TaskStatus

DEMO_TASKS = [
    {
        "title": "Backend Integration",
        "desc": "Connect the dashboard client to the REST backend.",
        "status": TaskStatus.IN_PROGRESS,
        "priority": TaskPriority.HIGH,
        "comments": ["Initial setup done.", "Wiring up fetch hooks."],
    },
    {
        "title": "Database Schema Design",
        "desc": "Define Task and Log models.",
        "status": TaskStatus.DONE,
        "priority": TaskPriority.HIGH,
        "comments": [],
    },
    {
        "title": "User Auth Module",
        "desc": "Implement JWT based auth for multi-user access.",
        "status": TaskStatus.PLANNING,
        "priority": TaskPriority.MEDIUM,
        "comments": [],
    },
]


async def seed():
    """Delete every task (comments cascade) and insert the demo set."""
    await init_db()
    async with AsyncSessionLocal() as db:
        await db.execute(delete(Comment))
        await db.execute(delete(Task))
        for entry in DEMO_TASKS:
            task = Task(
                title=entry["title"],
                desc=entry["desc"],
                status=entry["status"],
                priority=entry["priority"],
            )
            task.comments = [Comment(text=text) for text in entry["comments"]]
            db.add(task)
        await db.commit()
    print(f"Database seeded with {len(DEMO_TASKS)} tasks")


if __name__ == "__main__":
    asyncio.run(seed())
