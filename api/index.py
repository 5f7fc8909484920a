from taskboard import create_app
from config_prod import ProductionConfig

# WSGI entry point for serverless deployments
app = create_app(ProductionConfig)

if __name__ == '__main__':
    app.run()
