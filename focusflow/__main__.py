from focusflow.focus import run

run()
