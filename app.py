"""Run the Geo Attendance API: ``python app.py`` (settings chosen by APP_ENV)."""

import os

from src.geo_attendance.geo_attendance.main import create_app

app = create_app()

if __name__ == "__main__":
    app.run(host=os.getenv("HOST", "0.0.0.0"), port=int(os.getenv("PORT", "8080")), use_reloader=False)
