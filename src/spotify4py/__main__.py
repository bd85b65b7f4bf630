from spotify4py.ui.cli import run

run()
