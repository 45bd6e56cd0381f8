import argparse
import logging
import sys

from PySide6 import QtCore, QtWidgets

from arcseekbar.core import ArcSeekBarConfig, load_config
from arcseekbar.widgets import ArcSeekBarWidget

CUSTOM_ARC_COLORS = ("#00e5ff", "#76ff03", "#ffea00", "#ff3d00")


class MyWidget(QtWidgets.QWidget):
    def __init__(self, config: ArcSeekBarConfig):
        super().__init__()

        self.layout = QtWidgets.QVBoxLayout(self)
        self.buttons_layout = QtWidgets.QHBoxLayout()

        self.progress_text = QtWidgets.QLabel()
        self.progress_text.setAlignment(QtCore.Qt.AlignmentFlag.AlignCenter)
        self.seek_bar = ArcSeekBarWidget(config, parent=self)
        self.btn_0 = QtWidgets.QPushButton("0")
        self.btn_90 = QtWidgets.QPushButton("90")

        self.buttons_layout.addWidget(self.btn_0)
        self.buttons_layout.addWidget(self.btn_90)
        self.layout.addWidget(self.progress_text)
        self.layout.addWidget(self.seek_bar, stretch=1)
        self.layout.addLayout(self.buttons_layout)

        self.set_energy(self.seek_bar.progress())

        self.seek_bar.progressChanged.connect(lambda progress, is_user: self.set_energy(self.seek_bar.progress()))
        self.seek_bar.trackingStopped.connect(lambda: self.set_energy(self.seek_bar.progress()))
        self.btn_0.clicked.connect(lambda: self.seek_bar.set_progress(0))
        self.btn_90.clicked.connect(lambda: self.seek_bar.set_progress(90))

    def set_energy(self, progress: int):
        self.progress_text.setText(f"POWER {progress} %")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="ArcSeekBar demo")
    parser.add_argument("--config", help="JSON file with ArcSeekBarConfig fields")
    parser.add_argument("--max", type=int, dest="max_value", help="maximum progress value")
    parser.add_argument("--min", type=int, dest="min_value", help="minimum progress value")
    parser.add_argument("--open-angle", type=float, help="gap at the bottom of the arc, degrees")
    parser.add_argument("--rotate-angle", type=float, help="rotation of the arc, degrees")
    parser.add_argument("--log-level", default="WARNING", help="logging level (DEBUG, INFO, ...)")
    return parser.parse_args(argv)


def build_config(args) -> ArcSeekBarConfig:
    if args.config:
        config = load_config(args.config)
    else:
        config = ArcSeekBarConfig(arc_colors=CUSTOM_ARC_COLORS, max_value=200, min_value=50)
    overrides = {
        name: value for name, value in (
            ("max_value", args.max_value),
            ("min_value", args.min_value),
            ("open_angle", args.open_angle),
            ("rotate_angle", args.rotate_angle),
        ) if value is not None
    }
    return config.with_changes(**overrides) if overrides else config


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(name)s %(levelname)s: %(message)s")

    app = QtWidgets.QApplication(sys.argv[:1])

    widget = MyWidget(build_config(args))
    widget.resize(400, 480)
    widget.show()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
