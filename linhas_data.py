"""
Dados de Referência - Linhas e Veículos
========================================
Tabelas estáticas usadas quando FONTE_REFERENCIA = 'estatica'
(e para popular as tabelas linhas/veiculos do banco em seed_referencia).

Coordenadas em graus decimais (string). Campos vazios = coordenada desconhecida,
a distância dessas linhas cai para o 'km' pré-calculado ou para 0.
"""

# ==========================================
# LINHAS (chave: código da linha no validador)
# ==========================================
LINHAS = {
    "9901": {"cod": "9901", "local1": "Rodoviária Interestadual de Formosa de Goiás (Via BR-020)", "local2": "Rodoviária de Planaltina - DF (Jardim Roriz)", "linha": "Planaltina-DF - Formosa-GO", "cod_antt": "12-0338-70", "km": "50.9", "lat1": "-15.5508008", "lng1": "-47.3375733", "lat2": "-15.61845461", "lng2": "-47.65430421"},
    "9902": {"cod": "9902", "local1": "Rodoviária Interestadual de Formosa de Goiás", "local2": "Rodoviária de Planaltina - DF (Via BR-479 / Vale do Amanhecer)", "linha": "Planaltina-DF - Formosa-GO", "cod_antt": "12-0338-70", "km": "", "lat1": "-15.5508008", "lng1": "-47.3375733", "lat2": "-15.61845461", "lng2": "-47.65430421"},
    "9903": {"cod": "9903", "local1": "Rodoviária Interestadual de Formosa de Goiás (Via BR-020)", "local2": "Posto Itiquira", "linha": "Formosa-GO - Posto Itiquira", "cod_antt": "12-0338-70", "km": "80.8", "lat1": "-15.5508008", "lng1": "-47.3375733", "lat2": "", "lng2": ""},
    "9904": {"cod": "9904", "local1": "Rodoviária Interestadual de Formosa de Goiás (Via BR-020)", "local2": "Brasília-DF", "linha": "Formosa-GO - Brasília-DF", "cod_antt": "12-0338-70", "km": "80.8", "lat1": "-15.5508008", "lng1": "-47.3375733", "lat2": "-15.7936645", "lng2": "-47.8829638"},
    "1001": {"cod": "1001", "local1": "Rodoviária de Planaltina de Goiás", "local2": "Rodoviária do Plano Piloto", "linha": "Planaltina-GO - Brasilia-DF", "cod_antt": "12-0730-70", "km": "70.6", "lat1": "-15.43488062", "lng1": "-47.6108282", "lat2": "-15.7936645", "lng2": "-47.8829638"},
    "1002": {"cod": "1002", "local1": "Rodoviária de Planaltina de Goiás", "local2": "L2 Norte - Sul (Terminal Asa Sul)", "linha": "Planaltina-GO - Brasilia-DF", "cod_antt": "12-0730-70", "km": "82.1", "lat1": "-15.43488062", "lng1": "-47.6108282", "lat2": "-15.8362131", "lng2": "-47.9328304"},
    "1003": {"cod": "1003", "local1": "Rodoviária de Planaltina de Goiás", "local2": "Eixo Norte e Sul (Terminal Asa Sul) - Executivo", "linha": "Planaltina-GO - Brasilia-DF", "cod_antt": "12-0730-70", "km": "71.1", "lat1": "-15.43488062", "lng1": "-47.6108282", "lat2": "-15.8362131", "lng2": "-47.9328304"},
    "1054": {"cod": "1054", "local1": "Mutirão", "local2": "Eixo Norte e Sul / Terminal Asa Sul", "linha": "Planaltina-GO - Brasilia-DF", "cod_antt": "12-0730-70", "km": "74.4", "lat1": "-15.42378904", "lng1": "-47.62148262", "lat2": "-15.8362131", "lng2": "-47.9328304"},
    "1055": {"cod": "1055", "local1": "Bairro São Fransciso", "local2": "Eixo Norte e Sul (Terminal Asa Sul)", "linha": "Planaltina-GO - Brasilia-DF", "cod_antt": "12-0730-70", "km": "64.5", "lat1": "-15.43488062", "lng1": "-47.6108282", "lat2": "-15.8362131", "lng2": "-47.9328304"},
    "1056": {"cod": "1056", "local1": "Bairro Imigrantes", "local2": "Eixo Norte e Sul (Terminal Asa Sul)", "linha": "Planaltina-GO - Brasilia-DF", "cod_antt": "12-0730-70", "km": "69.6", "lat1": "-15.43488062", "lng1": "-47.6108282", "lat2": "-15.8362131", "lng2": "-47.9328304"},
    "1057": {"cod": "1057", "local1": "Planaltina-GO (São José)", "local2": "Eixo W Norte e Sul / Terminal Asa Sul", "linha": "Planaltina-GO - Brasilia-DF", "cod_antt": "12-0730-70", "km": "", "lat1": "-15.43488062", "lng1": "-47.6108282", "lat2": "-15.8362131", "lng2": "-47.9328304"},
    "1058": {"cod": "1058", "local1": "Planaltina de Goiás (Setor Oeste e Sul)", "local2": "Eixo Norte e Sul (Terminal da Asa Sul)", "linha": "Planaltina-GO - Brasilia-DF", "cod_antt": "12-0730-70", "km": "68.3", "lat1": "-15.45837295", "lng1": "-47.6227588", "lat2": "-15.8362131", "lng2": "-47.9328304"},
    "1059": {"cod": "1059", "local1": "Mutirão (Via Feira)", "local2": "Rodoviária do Plano Piloto (Via Eixo Norte)", "linha": "Planaltina-GO - Brasilia-DF", "cod_antt": "12-0730-70", "km": "64.9", "lat1": "-15.42378904", "lng1": "-47.62148262", "lat2": "-15.7936645", "lng2": "-47.8829638"},
    "1060": {"cod": "1060", "local1": "Bairro Nara (Via Setor Norte)", "local2": "Terminal Asa Sul (Eixo Norte e Sul)", "linha": "Planaltina-GO - Brasilia-DF", "cod_antt": "12-0730-70", "km": "71.5", "lat1": "-15.43488062", "lng1": "-47.6108282", "lat2": "-15.8362131", "lng2": "-47.9328304"},
    "1061": {"cod": "1061", "local1": "Planaltina-GO (Brasilinha 17)", "local2": "Eixo W Norte e Sul/T.A.S. ", "linha": "Planaltina-GO - Brasilia-DF", "cod_antt": "12-0730-70", "km": "63.4", "lat1": "-15.43488062", "lng1": "-47.6108282", "lat2": "-15.8362131", "lng2": "-47.9328304"},
    "1062": {"cod": "1062", "local1": "Planaltina-GO", "local2": "Eixo W Norte e Sul / Terminal Asa Sul", "linha": "Planaltina-GO - Brasilia-DF", "cod_antt": "12-0730-70", "km": "", "lat1": "-15.43488062", "lng1": "-47.6108282", "lat2": "-15.8362131", "lng2": "-47.9328304"},
    "1073": {"cod": "1073", "local1": "Rodoviária de Planaltina de Goiás", "local2": "Eixo Norte e Sul (Terminal Asa Sul)", "linha": "Planaltina-GO - Brasilia-DF", "cod_antt": "12-0730-70", "km": "76.3", "lat1": "-15.43488062", "lng1": "-47.6108282", "lat2": "-15.8362131", "lng2": "-47.9328304"},
    "1074": {"cod": "1074", "local1": "Rodoviária de Planaltina de Goiás", "local2": "W3 Norte e Sul (Terminal Asa Sul)", "linha": "Planaltina-GO - Brasilia-DF", "cod_antt": "12-0730-70", "km": "77.0", "lat1": "-15.43488062", "lng1": "-47.6108282", "lat2": "-15.8362131", "lng2": "-47.9328304"},
    "1102": {"cod": "1102", "local1": "Rodoviária de Planaltina de Goiás", "local2": "Lago Norte", "linha": "Planaltina-GO - Brasilia-DF", "cod_antt": "12-0730-70", "km": "71.9", "lat1": "-15.43488062", "lng1": "-47.6108282", "lat2": "-15.72153869", "lng2": "-47.87672546"},
    "1301": {"cod": "1301", "local1": "Rodoviária de Planaltina de Goiás", "local2": "SIA-SAAN (SOF Sul)", "linha": "Planaltina-GO - Brasilia-DF", "cod_antt": "12-0730-70", "km": "85.5", "lat1": "-15.43488062", "lng1": "-47.6108282", "lat2": "-15.8362131", "lng2": "-47.9328304"},
    "1322": {"cod": "1322", "local1": "Mutirão", "local2": "Setor Gráfico (Eixo Norte)", "linha": "Planaltina-GO - Brasilia-DF", "cod_antt": "12-0730-70", "km": "80.9", "lat1": "-15.42378904", "lng1": "-47.62148262", "lat2": "-15.8362131", "lng2": "-47.9328304"},
    "1323": {"cod": "1323", "local1": "Rodoviária de Planaltina de Goiás", "local2": "Sudoeste (W3 Norte - Terminal da Asa Sul)", "linha": "Planaltina-GO - Brasilia-DF", "cod_antt": "12-0730-70", "km": "81.0", "lat1": "-15.43488062", "lng1": "-47.6108282", "lat2": "-15.8362131", "lng2": "-47.9328304"},
    "1324": {"cod": "1324", "local1": "Planaltina de Goiás", "local2": "Noroeste / Setor Gráfico", "linha": "Planaltina-GO - Brasilia-DF", "cod_antt": "12-0730-70", "km": "94.8", "lat1": "-15.43488062", "lng1": "-47.6108282", "lat2": "-15.8362131", "lng2": "-47.9328304"},
    "1326": {"cod": "1326", "local1": "Rodoviária de Planaltina de Goiás", "local2": "Noroeste", "linha": "Planaltina-GO - Brasilia-DF", "cod_antt": "12-0730-70", "km": "83.5", "lat1": "-15.43488062", "lng1": "-47.6108282", "lat2": "-15.8362131", "lng2": "-47.9328304"},
    "1327": {"cod": "1327", "local1": "Mutirão", "local2": "Noroeste", "linha": "Planaltina-GO - Brasilia-DF", "cod_antt": "12-0730-70", "km": "78.5", "lat1": "-15.42378904", "lng1": "-47.62148262", "lat2": "-15.8362131", "lng2": "-47.9328304"},
    "1901": {"cod": "1901", "local1": "Rodoviária de Planaltina de Goiás", "local2": "Rodoviária de Sobradinho I", "linha": "Planaltina-GO - Sobradinho-DF", "cod_antt": "12-0730-70", "km": "53.7", "lat1": "-15.43488062", "lng1": "-47.6108282", "lat2": "-15.64965962", "lng2": "-47.78525909"},
    "1902": {"cod": "1902", "local1": "Rodoviária de Planaltina de Goiás", "local2": "Grande Colorado", "linha": "Planaltina-GO - Brasilia-DF", "cod_antt": "12-0730-70", "km": "57.3", "lat1": "-15.43488062", "lng1": "-47.6108282", "lat2": "-15.68902632", "lng2": "-47.85773071"},
    "1950": {"cod": "1950", "local1": "Rodoviária de Planaltina de Goiás", "local2": "Rodoviária de Planaltina DF (Via Estância)", "linha": "Planaltina-GO - Planaltina-DF", "cod_antt": "12-1070-70", "km": "40.1", "lat1": "-15.43488062", "lng1": "-47.6108282", "lat2": "-15.61845461", "lng2": "-47.65430421"},
    "1952": {"cod": "1952", "local1": "Rodoviária de Planaltina de Goiás", "local2": "Rodoviária de Planaltina - DF (Via Roriz)", "linha": "Planaltina-GO - Planaltina-DF", "cod_antt": "12-1070-70", "km": "40.8", "lat1": "-15.43488062", "lng1": "-47.6108282", "lat2": "-15.61845461", "lng2": "-47.65430421"},
    "1953": {"cod": "1953", "local1": "Rodoviária de Planaltina de Goiás (Via Centro Feira)", "local2": "Morro da Capelinha (Via DF-128)", "linha": "Planaltina-GO - Morro da Capelinha", "cod_antt": "12-0730-70", "km": "40.6", "lat1": "-15.43488062", "lng1": "-47.6108282", "lat2": "", "lng2": ""},
}

# ==========================================
# PLACAS (chave: número do veículo no validador)
# ==========================================
PLACAS = {
    "1001": "JHX-0E23",
    "1002": "JHX-4G03",
    "1003": "JHX-0D23",
    "1004": "JHX-0D03",
    "1005": "FVW-2B32",
    "1006": "FYP-4C15",
    "1007": "FIV-1H01",
    "1008": "JHX-5A03",
    "1009": "JHX-0D53",
    "1010": "JHX-4E43",
    "1011": "JHJ-4F62",
    "1012": "JHX-0E03",
    "1014": "JHX-0D93",
    "1015": "JHJ-4F82",
    "1016": "JHX-4J03",
    "1017": "JHX-0D73",
    "1018": "JHJ-4F22",
    "1019": "JHJ-5G22",
    "1020": "FWC-6J06",
    "1021": "JHX-5093",
    "1024": "JHX-4J63",
    "1025": "JHJ-7B62",
    "1026": "JHX-0D43",
    "1027": "JHX-4J33",
    "1028": "JHX-4I93",
    "1029": "JHX-4D83",
    "1030": "JHX-5A83",
    "1031": "JHX-4G13",
    "1032": "JHX-5A53",
    "1033": "JHX-5A63",
    "1034": "JHX-0C83",
    "1035": "JHX-4F33",
    "1036": "JHX-4D73",
    "1037": "JHX-4463",
    "1038": "JHX-0213",
    "1039": "JHX-0383",
    "1040": "JHX-4423",
    "1041": "JHX-4563",
    "1042": "JHX-4543",
    "1043": "JHX-0C43",
    "1044": "JHX-0193",
    "1045": "JHX-5023",
    "1046": "JHX-4523",
    "1047": "JHX-0253",
    "1048": "JHX-0C23",
    "1049": "JHJ-7292",
    "1050": "JHJ-7282",
    "1051": "JHJ-5642",
    "1052": "JHJ-6462",
    "1053": "JHJ-4672",
    "1054": "JHJ-7372",
    "1055": "JHJ-5522",
    "1056": "JHJ-4502",
    "1057": "JHJ-4602",
    "1058": "JHJ-4592",
    "1059": "JHX-4953",
    "1060": "JHX-5123",
    "1061": "JHX-4393",
    "1062": "JHX-4883",
    "1063": "JHX-4973",
    "1064": "JHX-5073",
    "1066": "JHX-5103",
    "1067": "JHX-4923",
    "1068": "JHX-0363",
    "1340": "ECM-5243",
    "101001": "LUJ-8G12",
    "101002": "LMX-5F24",
    "101003": "LUF-9D66",
    "101004": "LMX-2J75",
    "101005": "LMY-0E77",
}
