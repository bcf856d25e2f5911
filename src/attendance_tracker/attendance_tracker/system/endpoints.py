AVAILABLE_ENDPOINTS = [
    "GET  /",
    "GET  /api/health",
    "GET  /api/init",
    "POST /api/init",
    "GET  /api/attendance",
    "POST /api/attendance",
    "DELETE /api/attendance/:id",
    "GET  /api/attendance/search?query=name",
    "GET  /api/attendance/stats?query=&date=",
    "GET  /dashboard",
    "GET  /records",
    "GET  /records/new",
    "POST /records/new",
    "POST /records/:id/delete",
]
