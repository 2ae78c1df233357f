# run_dev.py
"""
Local development launcher for FastAPI.
Equivalent to: `uvicorn scribe.app:app --reload --host 127.0.0.1 --port 8000`
"""

import uvicorn

if __name__ == "__main__":
    uvicorn.run(
        "scribe.app:app",
        host="127.0.0.1",
        port=8000,
        reload=True,
    )
