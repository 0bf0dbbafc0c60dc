"""
Launcher script for the YouTube Thumbnail Studio Streamlit app.
"""

import os
import argparse
import subprocess
import sys
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

def main():
    """Launch the Streamlit app with command line options."""
    parser = argparse.ArgumentParser(description="YouTube Thumbnail Studio Streamlit App")
    parser.add_argument("--port", type=int, default=8501, help="Port to run Streamlit on")
    parser.add_argument("--data-dir", help="Directory for downloads, generated media and the session store")
    args = parser.parse_args()

    # Get the absolute path of the app directory
    app_dir = Path(__file__).parent.absolute()
    app_path = app_dir / "thumbstudio" / "frontend" / "streamlit_app.py"

    # Set up environment variables
    env = os.environ.copy()

    if args.data_dir:
        env["DATA_DIR"] = args.data_dir

    # Add the project root to PYTHONPATH to fix import issues
    env["PYTHONPATH"] = str(app_dir) + os.pathsep + env.get("PYTHONPATH", "")

    # Print startup info
    print(f"Starting YouTube Thumbnail Studio on port {args.port}")
    if not env.get("GEMINI_API_KEY") and not env.get("API_KEY"):
        print("GEMINI_API_KEY is not set: AI features will be unavailable")

    # Construct the command to run Streamlit
    cmd = [
        "streamlit", "run", str(app_path),
        "--server.port", str(args.port),
        "--server.headless", "true",
        "--browser.serverAddress", "localhost",
        "--browser.gatherUsageStats", "false",
    ]

    # Run Streamlit app
    try:
        subprocess.run(cmd, env=env, check=True)
    except KeyboardInterrupt:
        print("Streamlit app stopped")
    except Exception as e:
        print(f"Error running Streamlit app: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
