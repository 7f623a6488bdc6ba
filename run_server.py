#!/usr/bin/env python3
"""
Entry point for running the playerctl control API on the desktop
session under a systemd user unit. This file lets us avoid relying
on `flask run` and keeps behavior consistent.
"""

from playerctl_wrapper.app import app

def main():
    # - host=127.0.0.1 so only this machine can drive the player
    # - debug=False so we don't do autoreload loops under systemd
    app.run(host="127.0.0.1", port=5002, debug=False)

if __name__ == "__main__":
    main()
