import os

# headless platform for Qt, must be set before the QApplication is created
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
