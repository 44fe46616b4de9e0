# run_app.py
import os
import sys

import streamlit.web.cli as stcli

APP_MODULES = ["app.py", "views.py", "collection.py", "schema.py", "resources.py", "identity.py",
               "query.py", "mutations.py", "notifications.py", "export.py", "errors.py",
               "logging_config.py", "config.py"]


def resolve_path(path):
    # PyInstaller unpacks bundled data next to sys._MEIPASS
    basedir = sys._MEIPASS if getattr(sys, "frozen", False) else os.path.dirname(os.path.abspath(__file__))
    return os.path.join(basedir, path)


def main():
    os.environ.setdefault("STREAMLIT_SERVER_HEADLESS", "true")
    sys.argv = ["streamlit", "run", resolve_path("app.py"), "--global.developmentMode=false"]
    return stcli.main()


if __name__ == "__main__":
    sys.exit(main())
