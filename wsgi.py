from src.eduattend.eduattend.main import create_app

app = create_app()
