# batch_upgrader/__main__.py
import sys
import traceback

def main():
    try:
        from batch_upgrader.main import run
        code = run()
    except Exception as e:
        print("Fatal error:", e)
        traceback.print_exc()
        sys.exit(2)
    sys.exit(code)

if __name__ == "__main__":
    main()
