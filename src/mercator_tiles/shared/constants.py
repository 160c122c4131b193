import math

# Число пи с полной двойной точностью
PI = math.pi

# Множитель перевода радиан в градусы
R2D = 180.0 / PI

# Радиус Земли для Web Mercator (метры)
EARTH_RADIUS_M = 6378137.0
RE = EARTH_RADIUS_M

# Длина экватора Web Mercator (метры)
EARTH_CIRCUMFERENCE_M = 2.0 * PI * RE
CE = EARTH_CIRCUMFERENCE_M

# Полный охват мира по долготе (градусы)
WORLD_LNG_SPAN_DEG = 360.0
WORLD_LNG_HALF_SPAN_DEG = 180.0

# Широты, на которых проекция уходит в бесконечность (градусы)
POLE_LAT_DEG = 90.0

# Коды EPSG: географическая WGS84 и сферический Web Mercator
WGS84_CODE = 4326
WEB_MERCATOR_CODE = 3857

# Формат вывода координат по умолчанию (printf-стиль)
DEFAULT_COORDINATE_FORMAT = '%f'

# Формат журнала
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DEFAULT_LOG_LEVEL = 'INFO'

# Наибольший зум, при котором 2.0 ** z остаётся конечным числом double
MAX_ZOOM = 1023
