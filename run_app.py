"""Run the API from project root. Use: python run_app.py"""
import os
import subprocess
import sys

root = os.path.dirname(os.path.abspath(__file__))
app_dir = os.path.join(root, "career_roadmap_ai")
os.chdir(app_dir)
subprocess.run([sys.executable, "-m", "uvicorn", "api:app", "--host", "0.0.0.0", "--port", "8000"], check=True)
