from pyezelm.app import build_default_router, build_program
from pyezelm.core import ProgramConfig, get_program_logger, init_logging, init_telemetry


DEFAULT_CFG: dict = {
	"ui.title": "pyezelm",
	"ui.theme": "arc",
	"logging.level": "INFO",
	"telemetry.enabled": False,
	"telemetry.sink": "log",
	"program.trace": False,
}


def main() -> None:
	cfg = ProgramConfig(DEFAULT_CFG)

	init_logging(cfg)
	init_telemetry(cfg, logger=get_program_logger("telemetry"))

	# Imported late: tkinter/ttkthemes only load once logging is configured
	from pyezelm.ui import ProgramWindow

	window = ProgramWindow(build_program(), router=build_default_router(), cfg=cfg)
	window.run()


if __name__ == "__main__":
	main()
