from cli import cli
from config.configs import configs
from utils.logger_utils import configure_logging

configure_logging(log_level=configs.app.log_level)

if __name__ == "__main__":
    cli()
