from task_tracker.app import create_app

# Built at import so `uvicorn main:app` works; fails fast without JWT_SECRET
app = create_app()
