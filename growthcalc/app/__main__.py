#run: python -m growthcalc.app

from growthcalc.app import create_app
from growthcalc.core.config import AppConfig

if __name__ == "__main__":
    config = AppConfig.load()
    create_app(config).run(port=5000, debug=config.debug)
