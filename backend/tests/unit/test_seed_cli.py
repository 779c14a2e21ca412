import src.taskboard.seed as seed_cli


async def test_seed_cli_creates_tables_and_seeds(monkeypatch, test_engine, capsys):
    from sqlalchemy.ext.asyncio import async_sessionmaker

    calls = []

    async def fake_create_tables():
        calls.append("create_tables")

    monkeypatch.setattr(seed_cli, "create_tables", fake_create_tables)
    monkeypatch.setattr(seed_cli, "AsyncSessionLocal", async_sessionmaker(test_engine, expire_on_commit=False))
    monkeypatch.setattr(seed_cli, "engine", test_engine)

    await seed_cli._main()

    assert calls == ["create_tables"]
    assert "Seeded 5 user(s)" in capsys.readouterr().out
