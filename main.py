import asyncio
import os

from app.bootstrap.bootstrapper import bootstrap_chat
from app.services.ConsoleService.console_service import ChatConsole


async def main():
    console: ChatConsole = bootstrap_chat(env=os.getenv("APP_ENV", "development"))
    await console.run()


if __name__ == "__main__":
    asyncio.run(main())
