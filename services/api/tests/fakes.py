"""In-process fakes for the Redis and MongoDB clients."""

import asyncio


class FakeRedis:
    """Stand-in for ``redis.asyncio.Redis`` supporting ``ping``."""

    def __init__(self, error: BaseException | None = None, hang: bool = False) -> None:
        self.error = error
        self.hang = hang
        self.pings = 0

    async def ping(self) -> bool:
        self.pings += 1
        if self.hang:
            await asyncio.Event().wait()
        if self.error is not None:
            raise self.error
        return True


class FakeMongo:
    """Stand-in for ``pymongo.AsyncMongoClient`` supporting ``admin.command``."""

    def __init__(self, error: BaseException | None = None, hang: bool = False) -> None:
        self.error = error
        self.hang = hang
        self.commands: list[str] = []
        self.admin = self

    async def command(self, name: str) -> dict[str, int]:
        self.commands.append(name)
        if self.hang:
            await asyncio.Event().wait()
        if self.error is not None:
            raise self.error
        return {"ok": 1}
