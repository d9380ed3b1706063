import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from blog_app.config import settings
from blog_app.database.connection import engine, Base
from blog_app.exceptions import register_exception_handlers
from blog_app.logging_config import configure_logging
from blog_app.api.v1 import analytics, auth, export, posts, visits

# Import models to ensure they're registered with Base
from blog_app.models import Post, Visit

configure_logging()

# Create database tables
Base.metadata.create_all(bind=engine)

# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Blog backend with post management and visit analytics",
    debug=settings.debug
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.get("/")
def read_root():
    """Root endpoint with API information"""
    return {
        "message": f"Welcome to {settings.app_name}",
        "version": settings.app_version,
        "docs": "/docs",
        "redoc": "/redoc"
    }


@app.get("/health")
def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "environment": settings.environment}




######## Include routers
app.include_router(auth.router, prefix="/api/v1")
app.include_router(posts.router, prefix="/api/v1")
app.include_router(visits.router, prefix="/api/v1")
app.include_router(analytics.router, prefix="/api/v1")
app.include_router(export.router, prefix="/api/v1")


if __name__ == "__main__":
    uvicorn.run(app, host=settings.host, port=settings.port)
