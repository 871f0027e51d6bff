# site_data.py
# Static site content: identity, contact, page copy and the bundled product
# list shown when Firestore is unreachable.

SITE = {
    "name": "Deco Ambiente",
    "full_name": "Deco Ambiente & Hogar",
    "tagline": "Piezas de autor para espacios que inspiran",
    "description": ("Descubre decoración exclusiva y mobiliario de diseño seleccionado "
                    "para quienes valoran la belleza extraordinaria en cada detalle."),
    "country": "Chile",
    "currency": "CLP",
    "locale": "es-CL",
}

CONTACT = {
    "phone": "+56 9 8765 4321",
    "phone_raw": "+56987654321",
    "email": "hola@decoambiente.cl",
    "address": "Av. Providencia 1234, Santiago, Chile",
    "whatsapp": "56987654321",
    "instagram": "https://instagram.com/decoambiente.cl",
    "facebook": "https://facebook.com/decoambientecl",
    "hours": {
        "week": "Lun–Vie: 9:00 – 19:00",
        "saturday": "Sáb: 10:00 – 15:00",
    },
}

WHATSAPP_DEFAULT_MESSAGE = ("Hola, me contacto desde el sitio web y quisiera consultar "
                            "sobre sus productos.")

NAV_LINKS = [
    {"endpoint": "home", "label": "Inicio"},
    {"endpoint": "catalog_page", "label": "Catálogo"},
    {"endpoint": "about_page", "label": "Nosotros"},
    {"endpoint": "contact_page", "label": "Contacto"},
]

SORT_LABELS = {
    "destacados": "Destacados",
    "nombre-asc": "Nombre A-Z",
    "nombre-desc": "Nombre Z-A",
    "precio-asc": "Menor precio",
    "precio-desc": "Mayor precio",
}

COPY = {
    "hero": {
        "badge": "Colección exclusiva · Chile",
        "title": "Tu hogar,",
        "title_em": "tu obra maestra",
        "subtitle": ("Descubre piezas únicas de decoración y mobiliario de autor, "
                     "seleccionadas para quienes valoran la belleza extraordinaria en cada detalle."),
        "cta_primary": "Ver Colección Completa",
        "cta_secondary": "Explorar Categorías",
        "stats": [
            {"value": "+500", "label": "Piezas únicas"},
            {"value": "+8", "label": "Colecciones"},
            {"value": "+1.200", "label": "Hogares transformados"},
        ],
    },
    "categories": {
        "title": "El ambiente que mereces, en cada espacio",
        "count_suffix": "piezas",
    },
    "featured": {
        "title": "Piezas destacadas",
        "subtitle": ("Una curaduría especial para quienes buscan lo extraordinario. "
                     "Cada pieza, elegida por su diseño, calidad y carácter."),
    },
    "about": {
        "title": "Transformamos espacios, creamos legados",
        "subtitle": ("Somos una casa de decoración especializada en piezas de diseño y "
                     "artesanía de autor. Desde 2015 asesoramos a quienes buscan lo "
                     "extraordinario para sus hogares."),
        "values": [
            {"title": "Curaduría de autor",
             "desc": ("Cada pieza de nuestra colección es seleccionada personalmente por "
                      "nuestro equipo.")},
            {"title": "Materiales nobles",
             "desc": ("Priorizamos maderas nativas, textiles naturales y cerámicas "
                      "artesanales.")},
            {"title": "Excelencia garantizada",
             "desc": ("Trabajamos con los mejores artesanos nacionales e importadores "
                      "especializados.")},
            {"title": "Asesoría exclusiva",
             "desc": ("Nuestro equipo te acompaña desde la primera consulta hasta la "
                      "entrega.")},
        ],
        "stats": [
            {"num": "+1.200", "label": "clientes satisfechos"},
            {"num": "+500", "label": "piezas únicas"},
            {"num": "10+", "label": "años de excelencia"},
        ],
    },
    "contact": {
        "title": "Contáctanos",
        "subtitle": ("¿Tienes una consulta, deseas asesoría personalizada o quieres hacer "
                     "un encargo especial? Escríbenos y respondemos el mismo día."),
        "submit": "Enviar por WhatsApp",
        "note": "Al hacer clic se abrirá WhatsApp con tu mensaje pre-cargado.",
    },
}

BENEFITS = [
    {"title": "Despacho a todo Chile", "desc": "Entregas coordinadas y embalaje premium."},
    {"title": "Piezas exclusivas", "desc": "Diseños de autor que no encontrarás en otra tienda."},
    {"title": "Asesoría sin costo", "desc": "Te ayudamos a elegir la pieza ideal para tu espacio."},
    {"title": "Garantía de calidad", "desc": "Materiales nobles y terminaciones artesanales."},
]

TESTIMONIALS = [
    {"name": "Valentina Moreno", "role": "Interiorista — Santiago", "avatar": "VM", "rating": 5,
     "comment": ("Deco Ambiente es mi primera elección cuando busco piezas para mis "
                 "proyectos de alto estándar.")},
    {"name": "Rodrigo Cisternas", "role": "Arquitecto — Vitacura", "avatar": "RC", "rating": 5,
     "comment": ("Siempre encuentro piezas que no están en ninguna otra tienda. "
                 "El sofá Riviera es una obra de arte.")},
    {"name": "Isabela Fontaine", "role": "Propietaria — Las Condes", "avatar": "IF", "rating": 5,
     "comment": ("Remodelé mi departamento con sus piezas y el resultado superó todo lo "
                 "que imaginaba.")},
    {"name": "Constanza Vergara", "role": "Diseñadora — Providencia", "avatar": "CV", "rating": 5,
     "comment": ("La asesoría personalizada marcó la diferencia. Me ayudaron a elegir "
                 "cada pieza con criterio y paciencia.")},
]

# Categories shown in the catalog filter when Firestore has none
DEFAULT_CATEGORIES = [
    {"slug": "living", "name": "Living", "emoji": "🛋️", "order": 1},
    {"slug": "dormitorio", "name": "Dormitorio", "emoji": "🛏️", "order": 2},
    {"slug": "cocina", "name": "Cocina", "emoji": "🍽️", "order": 3},
    {"slug": "jardin", "name": "Jardín", "emoji": "🌿", "order": 4},
    {"slug": "iluminacion", "name": "Iluminación", "emoji": "💡", "order": 5},
    {"slug": "textiles", "name": "Textiles", "emoji": "🧶", "order": 6},
    {"slug": "accesorios", "name": "Accesorios", "emoji": "✨", "order": 7},
]

FALLBACK_PRODUCTS = [
    {"id": "1", "name": "Sofá Riviera", "category": "living", "price": 1890000,
     "description": ("Sofá de tres cuerpos con estructura de madera maciza y tapizado en "
                     "lino belga natural. Diseño atemporal, hecho a mano."),
     "emoji": "🛋️", "featured": True, "tags": ["madera", "lino", "artesanal"],
     "stock": None, "sku": ""},
    {"id": "2", "name": "Lámpara Arc Doré", "category": "iluminacion", "price": 420000,
     "description": ("Lámpara de pie en arco con base de mármol travertino y pantalla de "
                     "seda ivory. Iluminación escultórica."),
     "emoji": "💡", "featured": True, "tags": ["marmol", "seda", "lujo"],
     "stock": None, "sku": ""},
    {"id": "3", "name": "Alfombra Bereber Atlas", "category": "textiles", "price": 950000,
     "description": ("Alfombra tejida a mano por artesanas del norte de África. Diseño "
                     "geométrico en tonos piedra y marfil. Única."),
     "emoji": "🧶", "featured": True, "tags": ["artesanal", "geometrico", "exclusivo"],
     "stock": None, "sku": ""},
    {"id": "4", "name": "Espejo Arco Provenzal", "category": "accesorios", "price": 380000,
     "description": ("Espejo de arco de 1,8m con marco tallado a mano en madera de pino, "
                     "acabado envejecido al agua."),
     "emoji": "🪞", "featured": True, "tags": ["madera", "vintage", "statement"],
     "stock": None, "sku": ""},
    {"id": "5", "name": "Mesa Travertino & Hierro", "category": "living", "price": 670000,
     "description": ("Mesa de centro con tablero de travertino natural y estructura de "
                     "hierro forjado en negro mate. Edición limitada."),
     "emoji": "🪑", "featured": True, "tags": ["travertino", "hierro", "edicion-limitada"],
     "stock": None, "sku": ""},
    {"id": "6", "name": "Macetero Artesanal Oaxaca", "category": "jardin", "price": 125000,
     "description": ("Macetero de cerámica elaborado por alfareros oaxaqueños. Diseño "
                     "acanalado en gres, tono tierra quemada. Set de 3."),
     "emoji": "🌿", "featured": True, "tags": ["ceramica", "artesanal", "jardin"],
     "stock": None, "sku": ""},
]

# ---------- seed data for an empty Firestore project ----------
SEED_CATEGORIES = [
    {"slug": "living", "name": "Living", "emoji": "🛋️", "order": 1,
     "description": "Sofas, sillones, mesas de centro y muebles para tu sala de estar"},
    {"slug": "dormitorio", "name": "Dormitorio", "emoji": "🛏️", "order": 2,
     "description": "Camas, mesas de luz, placares y todo para tu descanso"},
    {"slug": "cocina", "name": "Cocina", "emoji": "🍽️", "order": 3,
     "description": "Muebles de cocina, islas, alacenas y almacenamiento"},
    {"slug": "comedor", "name": "Comedor", "emoji": "🪑", "order": 4,
     "description": "Mesas, sillas, aparadores y todo para tus reuniones"},
    {"slug": "jardin", "name": "Jardin", "emoji": "🌿", "order": 5,
     "description": "Muebles de exterior, sombrillas, reposeras y decoracion"},
    {"slug": "iluminacion", "name": "Iluminacion", "emoji": "💡", "order": 6,
     "description": "Lamparas, colgantes, apliques y todo para iluminar tus espacios"},
    {"slug": "textiles", "name": "Textiles", "emoji": "🧶", "order": 7,
     "description": "Almohadas, mantas, cortinas y todo para dar calidez"},
    {"slug": "arte", "name": "Arte & Deco", "emoji": "🎨", "order": 8,
     "description": "Cuadros, espejos, esculturas y objetos decorativos"},
    {"slug": "oficina", "name": "Oficina", "emoji": "💼", "order": 9,
     "description": "Escritorios, sillas ergonómicas y organización para tu espacio de trabajo"},
    {"slug": "accesorios", "name": "Accesorios", "emoji": "✨", "order": 10,
     "description": "Pequeños detalles que marcan la diferencia"},
]

SEED_COLLECTIONS = [
    {"slug": "primavera-2026", "name": "Coleccion Primavera 2026",
     "description": "Colores frescos y disenos renovados para la nueva temporada",
     "imageUrl": "", "featured": True, "order": 1,
     "startDate": "2026-03-01", "endDate": "2026-05-31"},
    {"slug": "vintage", "name": "Coleccion Vintage",
     "description": "Piezas con historia y personalidad atemporal",
     "imageUrl": "", "featured": True, "order": 2},
    {"slug": "minimalista", "name": "Coleccion Minimalista",
     "description": "Diseno simple, funcional y elegante",
     "imageUrl": "", "featured": False, "order": 3},
    {"slug": "industrial", "name": "Coleccion Industrial",
     "description": "Estetica urbana con materiales nobles",
     "imageUrl": "", "featured": False, "order": 4},
    {"slug": "nordico", "name": "Coleccion Nordico",
     "description": "Calidez escandinava en cada detalle",
     "imageUrl": "", "featured": True, "order": 5},
]
