from playwright_perf.cli import app

if __name__ == "__main__":
    app()
