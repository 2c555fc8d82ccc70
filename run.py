#!/usr/bin/env python3
"""Simple script to run the application."""
import os

import uvicorn
from dotenv import load_dotenv

from habit_planner.services import ConfigService


def main():
    load_dotenv()
    server_cfg = ConfigService(os.getenv("HABIT_PLANNER_CONFIG")).settings.server

    print("=" * 60)
    print("Starting Habit Planner")
    print("=" * 60)
    print("\nEndpoints:")
    print("  GET  /questions/{habit}  onboarding questions")
    print("  POST /plan               enriched 7-day plan")
    print(f"\nServer will start at: http://{server_cfg.host}:{server_cfg.port}")
    print(f"API docs available at: http://{server_cfg.host}:{server_cfg.port}/docs")
    print("=" * 60)
    print()

    uvicorn.run(
        "habit_planner.main:app",
        host=server_cfg.host,
        port=server_cfg.port,
        reload=True,
        log_level="info"
    )


if __name__ == "__main__":
    main()
