from mangum import Mangum
from app.main import create_app

# the database is built from the environment on the first (cold start) lifespan
app = create_app()

handler = Mangum(app, lifespan="auto")
