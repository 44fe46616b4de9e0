# build.py
import os

import PyInstaller.__main__

from run_app import APP_MODULES

if __name__ == '__main__':
    args = [
        'run_app.py',
        '--name=Asset_Registry',
        '--onefile',
        '--clean',
        # '--windowed',  # add back once the build is known good; console shows crashes

        '--collect-all=streamlit',
        '--collect-all=pandas',

        # Streamlit reads its own package metadata at startup
        '--copy-metadata=streamlit',
        '--copy-metadata=packaging',

        '--exclude-module=pytest',
    ]
    # Streamlit runs app.py from source, so every flat module ships as data
    args += [f'--add-data={module}{os.pathsep}.' for module in APP_MODULES]
    PyInstaller.__main__.run(args)
