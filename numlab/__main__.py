"""Allow ``python -m numlab`` to run the simulation CLI."""


def _run() -> None:
    from numlab.sim.runner import main
    main()


if __name__ == "__main__":
    _run()
