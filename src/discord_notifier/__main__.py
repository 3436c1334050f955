"""Entry-point para ``python -m discord_notifier`` (envia DM a partir do stdin)."""

from discord_notifier.cli import send_main

if __name__ == "__main__":
    send_main()
