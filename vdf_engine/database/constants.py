from ..utils.EnvironmentManager import EnvironmentManager, EnvironmentVariables

DATABASE_TYPE = EnvironmentManager.get_string(EnvironmentVariables.DATABASE_TYPE)
DATABASE_NAME = EnvironmentManager.get_string(EnvironmentVariables.DATABASE_NAME)
DATABASE_USER = EnvironmentManager.get_string(EnvironmentVariables.DATABASE_USER)
DATABASE_PASSWORD = EnvironmentManager.get_string(EnvironmentVariables.DATABASE_PASSWORD)
DATABASE_HOST = EnvironmentManager.get_string(EnvironmentVariables.DATABASE_HOST)
DATABASE_PORT = EnvironmentManager.get_string(EnvironmentVariables.DATABASE_PORT)

# Create the database URL based on the database type
if DATABASE_TYPE == "sqlite":
    DATABASE_URL = f"sqlite:///{DATABASE_NAME}"
else:
    DATABASE_URL = (
        f"postgresql+psycopg2://{DATABASE_USER}:{DATABASE_PASSWORD}@{DATABASE_HOST}:{DATABASE_PORT}/{DATABASE_NAME}"
    )
