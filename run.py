#!/usr/bin/env python3
"""
Development server runner for the ProScore API.
Use this for local development and testing.
"""
import os
import sys


def main():
    # Add the project directory to the path
    project_dir = os.path.dirname(os.path.abspath(__file__))
    sys.path.insert(0, project_dir)

    # Import uvicorn
    try:
        import uvicorn
    except ImportError:
        print("Error: uvicorn not installed. Run: pip install uvicorn[standard]")
        sys.exit(1)

    from proscore.scoring.keywords import TAXONOMY_VERSION, get_available_roles
    print(f"✓ Keyword taxonomy v{TAXONOMY_VERSION}: {len(get_available_roles())} roles")

    if not os.getenv("PROSCORE_GEMINI_API_KEY"):
        print("⚠ Warning: PROSCORE_GEMINI_API_KEY not set.")
        print("  /api/score/verdict will return 503.")

    # Get configuration from environment
    host = os.getenv("PROSCORE_HOST", "0.0.0.0")
    port = int(os.getenv("PROSCORE_PORT", "8000"))
    debug = os.getenv("PROSCORE_DEBUG", "true").lower() == "true"

    print(f"\n🚀 Starting ProScore API")
    print(f"   Host: {host}")
    print(f"   Port: {port}")
    print(f"   Debug: {debug}")
    print(f"\n📚 API Documentation: http://localhost:{port}/docs")
    print(f"📖 ReDoc: http://localhost:{port}/redoc")
    print(f"❤️  Health Check: http://localhost:{port}/api/health\n")

    # Run the server
    uvicorn.run(
        "proscore.main:app",
        host=host,
        port=port,
        reload=debug,
        log_level="debug" if debug else "info",
    )


if __name__ == "__main__":
    main()
